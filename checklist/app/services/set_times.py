from typing import Iterable, List, Optional

from checklist.app.core.config import settings
from checklist.app.schemas.records import SetTimeSlot
from checklist.app.services.grouping import Record, artist_display_name, display_month_room
from checklist.app.utils.time_format import format_time_12hr

UNNAMED_ARTIST = "Unnamed Artist"


def calculate_set_times(artists: Iterable[Record], closing_time: Optional[str] = None) -> List[SetTimeSlot]:
    """
    Back-to-back slots for one month/room in chronological order.

    Each set ends when the next one starts; the last set ends at closing time.
    Artists without a start time are left out. Equal start times keep their
    input order (sorted() is stable). Returns [] when nobody has a start time.
    """
    closing_time = closing_time or settings.CLOSING_TIME
    # Raw records may carry non-string times; those render as "Invalid"
    scheduled = sorted(
        ((str(a["start_time"]), a) for a in artists if a.get("start_time")),
        key=lambda pair: pair[0],
    )

    slots = []
    for index, (start_time, artist) in enumerate(scheduled):
        if index < len(scheduled) - 1:
            end_time = scheduled[index + 1][0]
        else:
            end_time = closing_time
        slots.append(SetTimeSlot(
            start_time=start_time,
            end_time=end_time,
            name=artist_display_name(artist, UNNAMED_ARTIST),
        ))
    return slots


def format_slot(slot: SetTimeSlot) -> str:
    return f"{format_time_12hr(slot.start_time)} - {format_time_12hr(slot.end_time)}: {slot.name}"


def build_set_list(artists: Iterable[Record], closing_time: Optional[str] = None) -> List[str]:
    """Rendered set list lines, latest set first."""
    lines = [format_slot(slot) for slot in calculate_set_times(artists, closing_time)]
    lines.reverse()
    return lines


def format_set_times_text(month: str, room: str, artists: Iterable[Record], closing_time: Optional[str] = None) -> Optional[str]:
    """Clipboard text for a bucket's set times, or None if no artist has a start time."""
    lines = build_set_list(artists, closing_time)
    if not lines:
        return None
    return f"{display_month_room(month, room)} Set Times:\n" + "\n".join(lines)


def no_set_times_message(month: str, room: str) -> str:
    return f"No artists with start times found for {display_month_room(month, room)} to generate set times."
