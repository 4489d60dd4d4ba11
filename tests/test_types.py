"""Tests for ScheduleConfig, Cursor, DayAllocation and the error types."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from conftest import day


# ---------------------------------------------------------------------------
# ScheduleConfig
# ---------------------------------------------------------------------------
class TestScheduleConfig:

    def test_defaults(self):
        from effort_scheduler.types import ScheduleConfig

        config = ScheduleConfig(project_start_date=day("tue"))
        assert config.holidays == frozenset()
        assert config.include_weekends is False
        assert config.work_hours_per_day == 8.0
        assert config.max_search_days == 365

    def test_holidays_normalised(self):
        """Any iterable of date-like holidays becomes a frozenset of dates."""
        from effort_scheduler.types import ScheduleConfig

        config = ScheduleConfig(
            project_start_date=day("tue"),
            holidays=["2024-01-03", datetime(2024, 1, 3, 9), date(2024, 12, 25)],
        )
        assert config.holidays == frozenset({date(2024, 1, 3), date(2024, 12, 25)})

    def test_positional_fields(self):
        from effort_scheduler.types import ScheduleConfig

        config = ScheduleConfig(
            "2024-01-02", ("2024-01-03",), include_weekends=True,
            work_hours_per_day=6, max_search_days=10,
        )
        assert config.project_start_date == "2024-01-02"
        assert config.holidays == frozenset({date(2024, 1, 3)})
        assert config.include_weekends is True
        assert config.work_hours_per_day == 6
        assert config.max_search_days == 10

    def test_frozen(self):
        from effort_scheduler.types import ScheduleConfig

        config = ScheduleConfig(project_start_date=day("tue"))
        with pytest.raises(AttributeError):
            config.work_hours_per_day = 4  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Cursor / DayAllocation
# ---------------------------------------------------------------------------
class TestRecords:

    def test_cursor_equality(self):
        from effort_scheduler.types import Cursor

        assert Cursor(day("tue"), 4.0) == Cursor(day("tue"), 4.0)
        assert Cursor(day("tue")) == Cursor(day("tue"), 0.0)

    def test_allocation_days_spanned(self):
        from effort_scheduler.types import DayAllocation

        alloc = DayAllocation(
            start=day("fri"), end=day("next_mon"), effort=16.0,
            billed=((day("fri"), 8.0), (day("next_mon"), 8.0)),
        )
        assert alloc.days_spanned == 4
        assert sum(h for _, h in alloc.billed) == alloc.effort

    def test_allocation_frozen(self):
        from effort_scheduler.types import DayAllocation

        alloc = DayAllocation(start=day("tue"), end=day("tue"), effort=0.0)
        with pytest.raises(AttributeError):
            alloc.end = day("wed")  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class TestErrors:

    def test_invalid_configuration_attributes(self):
        from effort_scheduler.types import InvalidConfigurationError

        err = InvalidConfigurationError(
            "work_hours_per_day", "work hours per day must be greater than 0"
        )
        assert err.field == "work_hours_per_day"
        assert err.message == "work hours per day must be greater than 0"
        assert "work_hours_per_day" in str(err)

    def test_no_working_day_attributes(self):
        from effort_scheduler.types import NoWorkingDayFoundError, SchedulingError

        err = NoWorkingDayFoundError(day("mon"), 365)
        assert err.start == day("mon")
        assert err.max_steps == 365
        assert isinstance(err, SchedulingError)
        assert not isinstance(err, ValueError)
        assert "2024-01-01" in str(err)
        assert "not all days are configured as holidays" in str(err)

    def test_raise_and_catch_as_base(self):
        from effort_scheduler.types import NoWorkingDayFoundError, SchedulingError

        with pytest.raises(SchedulingError) as exc_info:
            raise NoWorkingDayFoundError(day("mon"), 7)
        assert exc_info.value.max_steps == 7
