"""Shared types: ScheduleConfig, Cursor, DayAllocation and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from effort_scheduler.days import DayLike, to_days

DEFAULT_WORK_HOURS_PER_DAY = 8.0
DEFAULT_MAX_SEARCH_DAYS = 365


@dataclass(frozen=True)
class ScheduleConfig:
    """Immutable configuration for one allocation run.

    ``holidays`` accepts any iterable of date-like values and is stored as a
    frozenset of plain dates. ``project_start_date`` is kept as given; it is
    validated and converted when a run starts so that a bad value surfaces
    as InvalidConfigurationError rather than at construction time.
    """

    project_start_date: DayLike
    holidays: frozenset[date] = field(default_factory=frozenset)
    include_weekends: bool = False
    work_hours_per_day: float = DEFAULT_WORK_HOURS_PER_DAY
    max_search_days: int = DEFAULT_MAX_SEARCH_DAYS

    def __post_init__(self) -> None:
        object.__setattr__(self, "holidays", to_days(self.holidays))


@dataclass(frozen=True)
class Cursor:
    """Allocator position: the current day and hours already used on it.

    Invariants:
        - current_date is a working day of the active configuration
        - 0 <= hours_used <= work_hours_per_day
    """

    current_date: date
    hours_used: float = 0.0


@dataclass(frozen=True)
class DayAllocation:
    """Immutable result of placing one task.

    Invariants:
        - start <= end
        - sum(hours for _, hours in billed) == effort
        - billed days are strictly increasing, none before start, last is end
    """

    start: date
    end: date
    effort: float
    billed: tuple[tuple[date, float], ...] = ()

    @property
    def days_spanned(self) -> int:
        """Calendar days from start to end inclusive, gaps included."""
        return (self.end - self.start).days + 1


class SchedulingError(Exception):
    """Base class for scheduling failures."""


class InvalidConfigurationError(SchedulingError, ValueError):
    """Raised before any allocation when the configuration is unusable."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Invalid configuration: {message} ({field})")


class NoWorkingDayFoundError(SchedulingError):
    """Raised when the calendar search bound is exhausted."""

    def __init__(self, start: date, max_steps: int) -> None:
        self.start = start
        self.max_steps = max_steps
        super().__init__(
            f"No valid working day was found after {max_steps} attempts "
            f"(searching from {start.isoformat()}). "
            f"Please verify that not all days are configured as holidays."
        )
