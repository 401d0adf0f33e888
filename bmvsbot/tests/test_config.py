from __future__ import annotations

import pytest

from bmvsbot.config import Settings, load_settings, with_overrides


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so values loaded from a .env file are undone too
    for name in ("SUB", "STATE", "WINDOWS"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults_when_env_is_empty() -> None:
    settings = load_settings(dotenv_path=None)
    assert settings == Settings(suburb="2010", state="NSW", headless=True)


def test_reads_sub_state_and_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUB", "Parramatta")
    monkeypatch.setenv("STATE", " vic ")
    monkeypatch.setenv("WINDOWS", "1")

    settings = load_settings(dotenv_path=None)
    assert settings.suburb == "Parramatta"
    assert settings.state == "VIC"
    assert settings.headless is False


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUB", "  ")
    monkeypatch.setenv("STATE", "")
    monkeypatch.setenv("WINDOWS", "")

    settings = load_settings(dotenv_path=None)
    assert settings == Settings()


def test_rejects_unknown_state(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATE", "XYZ")

    with pytest.raises(RuntimeError, match=r"Invalid STATE value"):
        load_settings(dotenv_path=None)


def test_dotenv_does_not_override_existing_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("SUB", "3000")

    dotenv = tmp_path / ".env"
    dotenv.write_text("SUB=4000\nSTATE=QLD\n")

    settings = load_settings(dotenv_path=str(dotenv))
    assert settings.suburb == "3000"
    assert settings.state == "QLD"


def test_overrides() -> None:
    base = Settings(suburb="2010", state="NSW", headless=True)

    assert with_overrides(base) == base
    assert with_overrides(base, suburb=" 6000 ", state="wa", show_browser=True) == Settings(
        suburb="6000", state="WA", headless=False
    )
    assert with_overrides(base, suburb="").suburb == "2010"
    assert with_overrides(base, state="  ").state == "NSW"

    with pytest.raises(RuntimeError, match=r"Invalid STATE value"):
        with_overrides(base, state="Sydney")
