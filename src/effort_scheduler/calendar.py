"""Layer 1: working-day calendar. Day-granularity predicates and stepping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import AbstractSet, Iterator

from effort_scheduler.days import DayLike, to_day, to_days
from effort_scheduler.types import (
    DEFAULT_MAX_SEARCH_DAYS,
    NoWorkingDayFoundError,
    ScheduleConfig,
)

_SATURDAY = 5
_SUNDAY = 6
_ONE_DAY = timedelta(days=1)


def is_weekend(day: DayLike) -> bool:
    """True on Saturday and Sunday."""
    return to_day(day).weekday() in (_SATURDAY, _SUNDAY)


def is_holiday(day: DayLike, holidays: AbstractSet[DayLike]) -> bool:
    """True if ``day`` falls on one of ``holidays``.

    Both ``day`` and the holiday entries may carry a time of day, which is
    ignored. Plain dates (see days.to_days) are matched by set lookup.
    """
    target = to_day(day)
    if target in holidays:
        return True
    return any(
        to_day(h, "holidays") == target for h in holidays if type(h) is not date
    )


def is_working_day(
    day: DayLike, holidays: AbstractSet[DayLike], include_weekends: bool
) -> bool:
    """Whether work can be billed on ``day``.

    Weekend days are excluded unless ``include_weekends``. Holidays are
    always excluded, including a holiday that falls on a worked weekend.
    """
    if not include_weekends and is_weekend(day):
        return False
    if is_holiday(day, holidays):
        return False
    return True


def next_working_day(
    day: DayLike,
    holidays: AbstractSet[DayLike],
    include_weekends: bool,
    max_steps: int = DEFAULT_MAX_SEARCH_DAYS,
) -> date:
    """First working day strictly after ``day``.

    Walks forward one day at a time. Raises NoWorkingDayFoundError if none
    of the ``max_steps`` following days is a working day.
    """
    candidate = to_day(day)
    holidays = to_days(holidays)
    for _ in range(max_steps):
        candidate += _ONE_DAY
        if is_working_day(candidate, holidays, include_weekends):
            return candidate
    raise NoWorkingDayFoundError(to_day(day), max_steps)


@dataclass(frozen=True)
class WorkingCalendar:
    """Holidays and weekend policy bundled for repeated queries.

    All dates are plain ``datetime.date`` values (local calendar days).
    """

    holidays: frozenset[date] = field(default_factory=frozenset)
    include_weekends: bool = False
    max_search_days: int = DEFAULT_MAX_SEARCH_DAYS

    def __post_init__(self) -> None:
        object.__setattr__(self, "holidays", to_days(self.holidays))

    @classmethod
    def from_config(cls, config: ScheduleConfig) -> WorkingCalendar:
        """Calendar view of a ScheduleConfig."""
        return cls(
            holidays=config.holidays,
            include_weekends=config.include_weekends,
            max_search_days=config.max_search_days,
        )

    def is_working_day(self, day: date) -> bool:
        return is_working_day(day, self.holidays, self.include_weekends)

    def next_working_day(self, day: date) -> date:
        return next_working_day(
            day, self.holidays, self.include_weekends, self.max_search_days
        )

    def first_working_day(self, day: date) -> date:
        """``day`` itself if workable, else the next working day."""
        if self.is_working_day(day):
            return day
        return self.next_working_day(day)

    def working_days(self, start: date, count: int) -> Iterator[date]:
        """Yield the first ``count`` working days on or after ``start``."""
        if count <= 0:
            return
        current = self.first_working_day(start)
        yield current
        for _ in range(count - 1):
            current = self.next_working_day(current)
            yield current
