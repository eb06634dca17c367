"""
Month / room bucketing for tasks, artists and guests.

Records are plain dicts (API payloads or ``model_dump()`` output). Missing
months go to the "Uncategorized - Assign Month" bucket, missing rooms go to
the lounge. Nothing here rejects a record.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from checklist.app.utils.time_format import MONTH_ORDER

UNCATEGORIZED_MONTH = "Uncategorized - Assign Month"
DEFAULT_ROOM = "lounge"

Record = Mapping[str, Any]
Grouped = Dict[str, Dict[str, List[Record]]]


def month_key(record: Record) -> str:
    return record.get("month") or UNCATEGORIZED_MONTH


def room_key(record: Record) -> str:
    return record.get("room") or DEFAULT_ROOM


def name_key(name: Optional[str]) -> str:
    # Case-insensitive, so "adam" sorts before "Zoe"
    return (name or "").casefold()


def month_sort_key(month: str) -> Tuple[int, int, str]:
    """
    Canonical months first in calendar order, then any other label
    alphabetically, then the uncategorized bucket.
    """
    if month == UNCATEGORIZED_MONTH:
        return (2, 0, "")
    if month in MONTH_ORDER:
        return (0, MONTH_ORDER.index(month), "")
    return (1, 0, month)


def sort_months(months: Iterable[str]) -> List[str]:
    return sorted(months, key=month_sort_key)


def group_by_month_room(records: Iterable[Record]) -> Grouped:
    """
    Group records into month -> room -> [records].

    Months come out in calendar order with uncategorized last. Rooms keep the
    order they were first seen in and records keep their input order, so
    callers apply their own sort inside each bucket.
    """
    grouped: Grouped = {}
    for record in records:
        grouped.setdefault(month_key(record), {}).setdefault(room_key(record), []).append(record)

    return {month: grouped[month] for month in sort_months(grouped)}


def group_by_month(records: Iterable[Record]) -> Dict[str, List[Record]]:
    """Single level month grouping with records sorted by name inside each month."""
    grouped: Dict[str, List[Record]] = {}
    for record in records:
        grouped.setdefault(month_key(record), []).append(record)

    return {
        month: sorted(grouped[month], key=lambda r: name_key(r.get("name")))
        for month in sort_months(grouped)
    }


def records_in_room(records: Iterable[Record], month: str, room: str) -> List[Record]:
    """Records for one month/room bucket; the lounge also takes records with no room set."""
    return [r for r in records if month_key(r) == month and room_key(r) == (room or DEFAULT_ROOM)]


def display_month_room(month: str, room: Optional[str]) -> str:
    """Heading for a bucket. Only May is split between the two rooms."""
    if month == "May":
        return "May - Main Room" if room == "main" else "May - Lounge"
    return month


# --- Per record type ordering inside a bucket ---

def task_sort_key(task: Record):
    # Incomplete first, then by due date+time, undated tasks last
    due = (task.get("due_date") or "") + (task.get("due_time") or "")
    return (bool(task.get("complete")), 0 if due else 1, due)


def artist_display_name(artist: Record, fallback: str = "") -> str:
    return artist.get("stage_name") or artist.get("name") or fallback


def artist_sort_key(artist: Record):
    # Scheduled artists by start time, then the rest by name
    start = artist.get("start_time")
    if start:
        return (0, start, "")
    return (1, "", name_key(artist_display_name(artist)))


def guest_sort_key(guest: Record):
    return name_key(guest.get("name"))


SORT_KEYS = {
    "tasks": task_sort_key,
    "artists": artist_sort_key,
    "guests": guest_sort_key,
}


def grouped_view(records: Iterable[Record], kind: str) -> List[Dict[str, Any]]:
    """
    Ordered list of buckets ready for display:
    [{"month", "room", "heading", "items"}], items sorted for the record kind.
    """
    sort_key = SORT_KEYS[kind]
    buckets = []
    for month, rooms in group_by_month_room(records).items():
        for room, items in rooms.items():
            buckets.append({
                "month": month,
                "room": room,
                "heading": display_month_room(month, room),
                "items": sorted(items, key=sort_key),
            })
    return buckets
