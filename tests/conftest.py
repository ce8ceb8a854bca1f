"""Shared pytest fixtures and test helpers for durctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from durctl.infrastructure.calendar import NaiveCalendar, ZoneInfoCalendar
from durctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def zoneinfo_calendar() -> ZoneInfoCalendar:
    return ZoneInfoCalendar()


@pytest.fixture
def naive_calendar() -> NaiveCalendar:
    return NaiveCalendar()


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo what a CLI invocation leaves behind: log handlers and telemetry."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    durctl_level = logging.getLogger("durctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("durctl").setLevel(durctl_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir with no DURCTL_* env leaking in."""
    for key in ("DURCTL_CONFIG", "DURCTL_ENGINE__TIMEZONE", "DURCTL_ENGINE__CALENDAR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def parse_utc(text: str) -> datetime:
    """Parse a ``...Z`` string produced by the engine."""
    assert text.endswith("Z"), text
    return datetime.fromisoformat(text[:-1] + "+00:00")


def elapsed_hours(start: str, end: str) -> float:
    return (parse_utc(end) - parse_utc(start)).total_seconds() / 3600
