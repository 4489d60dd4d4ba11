"""effort-scheduler: turn hour estimates into working-day start/end dates."""

from effort_scheduler.allocator import (
    allocate,
    coerce_effort,
    plan,
    schedule_all,
    start_cursor,
)
from effort_scheduler.calendar import (
    WorkingCalendar,
    is_holiday,
    is_weekend,
    is_working_day,
    next_working_day,
)
from effort_scheduler.days import to_day, to_days
from effort_scheduler.loaders import load_config_json, parse_holidays
from effort_scheduler.types import (
    Cursor,
    DayAllocation,
    InvalidConfigurationError,
    NoWorkingDayFoundError,
    ScheduleConfig,
    SchedulingError,
)

__all__ = [
    "Cursor",
    "DayAllocation",
    "InvalidConfigurationError",
    "NoWorkingDayFoundError",
    "ScheduleConfig",
    "SchedulingError",
    "WorkingCalendar",
    "allocate",
    "coerce_effort",
    "is_holiday",
    "is_weekend",
    "is_working_day",
    "load_config_json",
    "next_working_day",
    "parse_holidays",
    "plan",
    "schedule_all",
    "start_cursor",
    "to_day",
    "to_days",
]
