from __future__ import annotations

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

DEFAULT_SUBURB = "2010"
DEFAULT_STATE = "NSW"

# Values of ContentPlaceHolder1_SelectLocation1_ddlState
STATES = ("ACT", "NSW", "NT", "QLD", "SA", "TAS", "VIC", "WA")


def _parse_state(raw: str) -> str:
    state = raw.strip().upper()
    if state not in STATES:
        raise RuntimeError(f"Invalid STATE value: {raw!r}. Expected one of: {', '.join(STATES)}")
    return state


@dataclass(frozen=True)
class Settings:
    # Suburb name or postcode typed into the location search box
    suburb: str = DEFAULT_SUBURB
    state: str = DEFAULT_STATE

    # WINDOWS=1 shows the browser window
    headless: bool = True


def _env_or_default(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def load_settings(dotenv_path: str | None = None) -> Settings:
    # Prefer .env in repo root; dotenv_path allows overriding in tests.
    load_dotenv(dotenv_path=dotenv_path, override=False)

    return Settings(
        suburb=_env_or_default("SUB", DEFAULT_SUBURB),
        state=_parse_state(_env_or_default("STATE", DEFAULT_STATE)),
        headless=not os.getenv("WINDOWS"),
    )


def with_overrides(
    settings: Settings,
    *,
    suburb: str | None = None,
    state: str | None = None,
    show_browser: bool = False,
) -> Settings:
    """Apply command line overrides on top of the environment settings."""
    changes: dict[str, object] = {}
    if suburb is not None and suburb.strip():
        changes["suburb"] = suburb.strip()
    if state is not None and state.strip():
        changes["state"] = _parse_state(state)
    if show_browser:
        changes["headless"] = False
    return replace(settings, **changes)
