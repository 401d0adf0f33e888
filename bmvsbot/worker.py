from __future__ import annotations

import logging
import sys
from typing import TextIO

from bmvsbot.config import Settings
from bmvsbot.domain import LocationRecord
from bmvsbot.extractor import extract_locations
from bmvsbot.ranking import format_report, rank_locations
from bmvsbot.selenium_provider import BASE_URL, search_locations, start_driver

logger = logging.getLogger(__name__)


def collect_table_rows(settings: Settings) -> list[list[str]]:
    logger.info("Starting browser (headless=%s)", settings.headless)
    driver = start_driver(headless=settings.headless)

    try:
        logger.info("Searching %s for suburb=%s state=%s", BASE_URL, settings.suburb, settings.state)
        rows = search_locations(driver, suburb=settings.suburb, state=settings.state)
        logger.info("Location table has %d rows (header included)", len(rows))
        return rows
    finally:
        try:
            driver.quit()
        except Exception:
            logger.warning("Failed to quit driver cleanly", exc_info=True)


def check_locations(settings: Settings) -> list[LocationRecord]:
    rows = collect_table_rows(settings)
    return rank_locations(extract_locations(rows))


def _summary(records: list[LocationRecord]) -> tuple[int, int, int]:
    with_slot = sum(1 for r in records if r.has_slot)
    malformed = sum(1 for r in records if r.is_malformed)
    return with_slot, len(records) - with_slot - malformed, malformed


def run_check_once(settings: Settings, *, out: TextIO | None = None) -> list[LocationRecord]:
    out = out if out is not None else sys.stdout

    ranked = check_locations(settings)

    with_slot, no_slot, malformed = _summary(ranked)
    logger.info("Locations: with_slot=%d no_slot=%d unrecognised=%d", with_slot, no_slot, malformed)

    out.write(format_report(ranked))
    out.flush()
    return ranked
