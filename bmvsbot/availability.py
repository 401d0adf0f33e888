from __future__ import annotations

import re
from datetime import datetime

from bmvsbot.domain import NO_SLOT_TEXT, MalformedInputError

_DATE_RE = re.compile(r"(\d{2})/(\d{2})/(\d{4})")
_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})\s+(AM|PM)", re.IGNORECASE)


def to_24_hour(hour: int, meridiem: str) -> int:
    meridiem = meridiem.upper()
    if meridiem == "PM" and hour != 12:
        return hour + 12
    if meridiem == "AM" and hour == 12:
        return 0
    return hour


def parse_availability(text: str) -> datetime | None:
    """Parse the 'first available' cell into a local (naive) datetime.

    Returns None for the site's "No available slot" text. Anything else that
    isn't a two-line date/time raises MalformedInputError.
    """
    stripped = text.strip()
    if stripped == NO_SLOT_TEXT:
        return None

    lines = [line.strip() for line in stripped.splitlines() if line.strip()]
    if len(lines) != 2:
        raise MalformedInputError(text, "expected a date line and a time line")
    date_part, time_part = lines

    date_match = _DATE_RE.fullmatch(date_part)
    if not date_match:
        raise MalformedInputError(text, "date is not DD/MM/YYYY")
    day, month, year = (int(g) for g in date_match.groups())

    time_match = _TIME_RE.fullmatch(time_part)
    if not time_match:
        raise MalformedInputError(text, "time is not H:MM AM/PM")
    hour, minute, meridiem = int(time_match.group(1)), int(time_match.group(2)), time_match.group(3)
    if not 1 <= hour <= 12:
        raise MalformedInputError(text, "hour is out of range")

    try:
        return datetime(year, month, day, to_24_hour(hour, meridiem), minute, 0)
    except ValueError as e:
        # month 13, 31/04, minute 60 ...
        raise MalformedInputError(text, str(e)) from e
