from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NO_SLOT_TEXT = "No available slot"


@dataclass(frozen=True)
class LocationRecord:
    """One row of the BMVS location table.

    raw_availability is kept exactly as rendered by the site, e.g.
    "21/05/2025\\n10:30 AM" or "No available slot".
    """

    location: str
    distance_km: int | None
    raw_availability: str
    parsed_availability: datetime | None = None
    # Set only when raw_availability is neither a date nor the no-slot text.
    parse_error: str | None = None

    @property
    def has_slot(self) -> bool:
        return self.parsed_availability is not None

    @property
    def is_malformed(self) -> bool:
        return self.parse_error is not None


class MalformedInputError(ValueError):
    """Availability text doesn't look like 'DD/MM/YYYY\\nH:MM AM|PM'."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class TableLayoutError(RuntimeError):
    """The location table no longer has the columns we read from."""
