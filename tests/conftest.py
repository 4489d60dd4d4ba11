"""Shared test fixtures and data loading for effort-scheduler.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference fortnight: Mon 2024-01-01 through Tue 2024-01-09.
"""

from __future__ import annotations

import json
from datetime import date, timedelta
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")
_calendars = _load_json(FIXTURES_DIR / "calendars.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
WORK_HOURS_PER_DAY = _reference["work_hours_per_day"]

# Day lookup:  DAYS["tue"] → date(2024, 1, 2)
DAYS: dict[str, date] = {
    d["name"]: date.fromisoformat(d["date"]) for d in _reference["days"]
}


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def day(name: str) -> date:
    """Date object for a named reference day."""
    return DAYS[name]


def iso(value: str) -> date:
    """Date from an ISO string."""
    return date.fromisoformat(value)


def consecutive_days(start: date, count: int) -> frozenset[date]:
    """``count`` consecutive dates beginning at ``start``."""
    return frozenset(start + timedelta(days=i) for i in range(count))


# ---------------------------------------------------------------------------
# Calendar and config factories
# ---------------------------------------------------------------------------
def make_calendar(name: str):
    """Build a WorkingCalendar from calendars.json by name."""
    from effort_scheduler.calendar import WorkingCalendar

    config = _calendars[name]
    return WorkingCalendar(
        holidays=frozenset(iso(h) for h in config["holidays"]),
        include_weekends=config["include_weekends"],
    )


def make_config(calendar_name: str = "weekdays",
                start: str = "2024-01-02",
                hours: float = WORK_HOURS_PER_DAY):
    """Build a ScheduleConfig from a named calendar and a start date."""
    from effort_scheduler.types import ScheduleConfig

    cal = make_calendar(calendar_name)
    return ScheduleConfig(
        project_start_date=iso(start),
        holidays=cal.holidays,
        include_weekends=cal.include_weekends,
        work_hours_per_day=hours,
    )


def tasks_with_efforts(*efforts) -> list[dict]:
    """Task dicts named T1, T2, ... with the given efforts."""
    return [{"name": f"T{i}", "effort": e} for i, e in enumerate(efforts, 1)]


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def weekdays_calendar():
    return make_calendar("weekdays")


@pytest.fixture
def seven_day_calendar():
    return make_calendar("seven_day")


@pytest.fixture
def weekdays_config():
    """Weekdays only, 8h days, starting Tue 2024-01-02."""
    return make_config("weekdays")


@pytest.fixture
def holiday_config():
    """Weekdays only, 8h days, Wed 2024-01-03 holiday, starting Tue 2024-01-02."""
    return make_config("wednesday_holiday")
