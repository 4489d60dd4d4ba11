"""Layer 2: hour-accumulation allocator.

Tasks are placed strictly in input order. Each task fills what is left of the
cursor's day before the cursor rolls to the next working day, so several
small tasks can share one day and a large task spans as many working days as
its effort needs.

The cursor is threaded explicitly: ``allocate`` takes a Cursor and returns the
next one, and ``plan`` / ``schedule_all`` are folds over the task list.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Iterable, Mapping

from effort_scheduler.calendar import is_working_day, next_working_day
from effort_scheduler.days import to_day
from effort_scheduler.types import (
    Cursor,
    DayAllocation,
    InvalidConfigurationError,
    NoWorkingDayFoundError,
    ScheduleConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_EFFORT_KEY = "effort"
DEFAULT_START_KEY = "start_date"
DEFAULT_END_KEY = "end_date"


def coerce_effort(raw: Any) -> float:
    """Read an effort value as non-negative hours.

    Numbers and numeric strings are accepted. Missing, non-numeric,
    non-finite and negative values count as 0. Booleans are not efforts.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _validate(config: ScheduleConfig) -> date:
    """Check the run preconditions. Returns the project start as a date."""
    hours = config.work_hours_per_day
    if (
        isinstance(hours, bool)
        or not isinstance(hours, (int, float))
        or not math.isfinite(hours)
        or hours <= 0
    ):
        raise InvalidConfigurationError(
            "work_hours_per_day", "work hours per day must be greater than 0"
        )
    try:
        return to_day(config.project_start_date, "project_start_date")
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            "project_start_date", "project start date is not valid"
        ) from e


def _roll(day: date, config: ScheduleConfig) -> date:
    """Next working day after ``day`` under ``config``."""
    return next_working_day(
        day, config.holidays, config.include_weekends, config.max_search_days
    )


def start_cursor(config: ScheduleConfig) -> Cursor:
    """Initial cursor for a run: the first working day on or after the start.

    Raises:
        InvalidConfigurationError: If hours per day or the start date are invalid.
        NoWorkingDayFoundError: If no working day follows a blocked start date.
    """
    day = _validate(config)
    if not is_working_day(day, config.holidays, config.include_weekends):
        rolled = _roll(day, config)
        logger.debug("Project start %s is not a working day, using %s", day, rolled)
        day = rolled
    return Cursor(current_date=day, hours_used=0.0)


def allocate(
    cursor: Cursor, effort: Any, config: ScheduleConfig
) -> tuple[Cursor, DayAllocation]:
    """Place one task at ``cursor``. One step of the fold.

    ``config`` is assumed valid (see start_cursor). A task with no effort
    occurs on the cursor day and leaves the cursor untouched. Otherwise
    hours are billed day by day; when the task leaves its last day exactly
    full, the returned cursor has already rolled to the next working day,
    unless no working day follows, in which case it is returned full.

    Returns:
        (next cursor, allocation for this task)

    Raises:
        NoWorkingDayFoundError: If a rollover finds no working day.
    """
    hours = coerce_effort(effort)
    if hours <= 0:
        day = cursor.current_date
        return cursor, DayAllocation(start=day, end=day, effort=0.0)

    capacity = config.work_hours_per_day
    day = cursor.current_date
    used = cursor.hours_used
    remaining = hours
    billed: list[tuple[date, float]] = []

    while remaining > 0:
        if used >= capacity:
            day = _roll(day, config)
            used = 0.0
            logger.debug("Rolled over to %s", day)
        chunk = min(remaining, capacity - used)
        remaining -= chunk
        used += chunk
        billed.append((day, chunk))

    allocation = DayAllocation(
        start=cursor.current_date, end=day, effort=hours, billed=tuple(billed)
    )

    # Eager roll: the next task starts from a fresh day. If the calendar is
    # exhausted the cursor stays full and the next billing task raises.
    if used >= capacity:
        try:
            day = _roll(day, config)
            used = 0.0
        except NoWorkingDayFoundError:
            logger.debug("No working day after %s, cursor left full", day)

    return Cursor(current_date=day, hours_used=used), allocation


def plan(
    tasks: Iterable[Mapping[str, Any]],
    config: ScheduleConfig,
    effort_key: str = DEFAULT_EFFORT_KEY,
) -> list[DayAllocation]:
    """Allocate every task in order and return the raw allocations.

    Fails as a whole: either every task is placed or an exception propagates.
    """
    cursor = start_cursor(config)
    logger.debug("Cursor starts at %s", cursor.current_date)

    allocations: list[DayAllocation] = []
    for index, task in enumerate(tasks):
        cursor, allocation = allocate(cursor, task.get(effort_key), config)
        logger.debug(
            "Task %d: %.2fh %s -> %s",
            index, allocation.effort, allocation.start, allocation.end,
        )
        allocations.append(allocation)
    return allocations


def schedule_all(
    tasks: Iterable[Mapping[str, Any]],
    config: ScheduleConfig,
    *,
    effort_key: str = DEFAULT_EFFORT_KEY,
    start_key: str = DEFAULT_START_KEY,
    end_key: str = DEFAULT_END_KEY,
) -> list[dict[str, Any]]:
    """Assign start and end dates to every task, in input order.

    Each task is copied into a new dict carrying its original entries plus
    ``start_key`` and ``end_key``; the input mappings are not modified.

    Args:
        tasks: Ordered task records. Order is scheduling priority.
        config: Run configuration.
        effort_key: Entry holding the effort in hours.
        start_key: Entry to receive the start date.
        end_key: Entry to receive the end date.

    Returns:
        New task dicts, same length and order as ``tasks``.

    Raises:
        InvalidConfigurationError: Before any task is placed.
        NoWorkingDayFoundError: If the calendar search bound is exhausted.
            No partial schedule is returned.
    """
    tasks = list(tasks)
    allocations = plan(tasks, config, effort_key=effort_key)

    scheduled = [
        {**task, start_key: allocation.start, end_key: allocation.end}
        for task, allocation in zip(tasks, allocations)
    ]
    if allocations:
        logger.info(
            "Scheduled %d tasks (%.2fh) from %s to %s",
            len(scheduled),
            sum(a.effort for a in allocations),
            allocations[0].start,
            allocations[-1].end,
        )
    return scheduled
