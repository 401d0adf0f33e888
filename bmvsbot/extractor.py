from __future__ import annotations

import logging
import re
from typing import Sequence

from bmvsbot.availability import parse_availability
from bmvsbot.domain import LocationRecord, MalformedInputError, TableLayoutError

logger = logging.getLogger(__name__)

# Column positions in .tbl-location
LOCATION_COLUMN = 1
DISTANCE_COLUMN = 2
AVAILABILITY_COLUMN = 4

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_distance(text: str) -> int | None:
    # "12 km" -> 12, "12.7" -> 12, "n/a" -> None
    m = _LEADING_INT_RE.match(text)
    if not m:
        return None
    return int(m.group(1))


def record_from_cells(cells: Sequence[str]) -> LocationRecord:
    if len(cells) <= AVAILABILITY_COLUMN:
        raise TableLayoutError(
            f"Location row has {len(cells)} cells, expected at least {AVAILABILITY_COLUMN + 1}: {list(cells)!r}"
        )

    location = cells[LOCATION_COLUMN].strip()
    raw_availability = cells[AVAILABILITY_COLUMN]

    try:
        parsed = parse_availability(raw_availability)
    except MalformedInputError as e:
        logger.warning("Unrecognised availability for %s (%s)", location, e)
        return LocationRecord(
            location=location,
            distance_km=parse_distance(cells[DISTANCE_COLUMN]),
            raw_availability=raw_availability,
            parse_error=e.reason,
        )

    if parsed is None:
        logger.debug("No available slot at %s", location)

    return LocationRecord(
        location=location,
        distance_km=parse_distance(cells[DISTANCE_COLUMN]),
        raw_availability=raw_availability,
        parsed_availability=parsed,
    )


def extract_locations(rows: Sequence[Sequence[str]]) -> list[LocationRecord]:
    """Turn table rows (header row first) into LocationRecords."""
    return [record_from_cells(cells) for cells in rows[1:]]
