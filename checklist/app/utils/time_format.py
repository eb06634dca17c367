"""
Time helpers for the 24+ hour encoding.

Set times are stored as "HH:MM" strings where HH runs past 23 for times after
midnight ("25:00" is 1:00 AM the following morning). Within one night, plain
string comparison of these values is chronological order, so callers sort
them as strings.
"""

import logging
import re
from datetime import date
from typing import Dict, List, Optional

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

MONTH_ORDER = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Latest hour the encoding represents (27 = 3:00 AM)
MAX_NIGHT_HOUR = 27

INVALID_TIME = "Invalid time"
INVALID_TIME_SHORT = "Invalid"

# "21:30", "25:00", or "21:30:00" as returned by SQL TIME columns
_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def _split_time(value: str):
    if not isinstance(value, str):
        raise ValueError(f"Time of day must be a string: {value!r}")
    match = _TIME_RE.match(value)
    if not match:
        raise ValueError(f"Malformed time of day: {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise ValueError(f"Minutes out of range: {value!r}")
    return hours, minutes


def _display_hour(hours: int) -> int:
    normalized = hours % 24
    return 12 if normalized % 12 == 0 else normalized % 12


def _period(hours: int) -> str:
    # Uses the raw hour: 24+ is after midnight, so AM
    return "AM" if hours < 12 or hours >= 24 else "PM"


def format_time(value: Optional[str]) -> str:
    """
    Format a 24+ hour time for display: "21:30" -> "9:30 PM", "25:00" -> "1:00 AM".

    Returns "" for empty input and "Invalid time" for anything unparseable.
    """
    if not value:
        return ""
    try:
        hours, minutes = _split_time(value)
    except ValueError:
        logger.debug("Could not format time %r", value)
        return INVALID_TIME
    return f"{_display_hour(hours)}:{minutes:02d} {_period(hours)}"


def format_time_12hr(value: Optional[str]) -> str:
    """Same as format_time without the AM/PM suffix ("25:00" -> "1:00"). Used for set lists."""
    if not value:
        return ""
    try:
        hours, minutes = _split_time(value)
    except ValueError:
        logger.debug("Could not format time %r", value)
        return INVALID_TIME_SHORT
    return f"{_display_hour(hours)}:{minutes:02d}"


def is_time_of_day(value: Optional[str], max_hour: int = MAX_NIGHT_HOUR) -> bool:
    if not value:
        return False
    try:
        hours, minutes = _split_time(value)
    except ValueError:
        return False
    if hours == MAX_NIGHT_HOUR and max_hour == MAX_NIGHT_HOUR:
        # The night ends at 27:00 (3:00 AM)
        return minutes == 0
    return hours <= max_hour


def normalize_time_of_day(value: str) -> str:
    """Zero padded "HH:MM" so string order stays chronological ("9:05:00" -> "09:05")."""
    hours, minutes = _split_time(value)
    return f"{hours:02d}:{minutes:02d}"


def generate_time_options() -> List[Dict[str, str]]:
    """
    Start time choices from 8:00 PM to 3:00 AM in 5 minute steps.

    `value` is the stored 24+ hour string, `display_value` the label.
    The last entry is exactly 27:00; nothing after 3:00 AM is offered.
    """
    options = []
    for hour in range(20, MAX_NIGHT_HOUR + 1):
        for minute in range(0, 60, 5):
            value = f"{hour:02d}:{minute:02d}"
            options.append({"value": value, "display_value": format_time(value)})
            if hour == MAX_NIGHT_HOUR:
                break
    return options


def month_from_date(value: Optional[str]) -> Optional[str]:
    """Month name for a YYYY-MM-DD date, used to file a task under its due month."""
    if not value:
        return None
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, OverflowError):
        logger.debug("Could not infer month from date %r", value)
        return None
    return MONTH_ORDER[parsed.month - 1]


def future_months(today: Optional[date] = None) -> List[str]:
    """Months from the current one through December."""
    today = today or date.today()
    return MONTH_ORDER[today.month - 1:]
