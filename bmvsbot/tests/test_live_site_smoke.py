"""Smoke test against the real BMVS site.

Skipped by default: it starts Chrome and depends on the site being up.

Run with:
    BMVS_LIVE=1 python -m pytest -q -m browser
"""

from __future__ import annotations

import io
import os

import pytest

from bmvsbot.config import Settings
from bmvsbot.worker import run_check_once

pytestmark = pytest.mark.browser


@pytest.mark.skipif(not os.getenv("BMVS_LIVE"), reason="Set BMVS_LIVE=1 to run against the live site")
def test_live_search_returns_ranked_locations() -> None:
    out = io.StringIO()
    ranked = run_check_once(Settings(), out=out)

    assert ranked
    assert "Available Locations:" in out.getvalue()
