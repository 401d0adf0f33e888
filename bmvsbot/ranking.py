from __future__ import annotations

from datetime import datetime
from functools import cmp_to_key
from typing import Iterable

from bmvsbot.domain import NO_SLOT_TEXT, LocationRecord


def compare_availability(a: LocationRecord, b: LocationRecord) -> int:
    left, right = a.parsed_availability, b.parsed_availability
    if left is None and right is None:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1
    return (left > right) - (left < right)


def rank_locations(records: Iterable[LocationRecord]) -> list[LocationRecord]:
    """Earliest slot first; locations without a slot keep their order at the end."""
    return sorted(records, key=cmp_to_key(compare_availability))


def format_availability(when: datetime) -> str:
    # Wednesday, May 21, 2025 at 02:30 PM
    return f"{when:%A}, {when:%B} {when.day}, {when:%Y} at {when:%I:%M %p}"


def _describe_availability(record: LocationRecord) -> str:
    if record.parsed_availability is not None:
        return format_availability(record.parsed_availability)
    if record.is_malformed:
        return f"Unrecognised ({record.raw_availability.strip()!r})"
    return NO_SLOT_TEXT


def format_report(records: Iterable[LocationRecord]) -> str:
    lines = ["Available Locations:", "==================="]

    count = 0
    for index, record in enumerate(records, start=1):
        count += 1
        distance = f"{record.distance_km} km" if record.distance_km is not None else "unknown"
        lines.append(f"{index}. {record.location}")
        lines.append(f"   Distance: {distance}")
        lines.append(f"   First Available: {_describe_availability(record)}")
        lines.append("-------------------")

    if not count:
        lines.append("No locations found.")

    return "\n".join(lines) + "\n"
