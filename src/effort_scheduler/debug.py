"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from effort_scheduler.calendar import WorkingCalendar
    from effort_scheduler.types import DayAllocation

_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_LABEL_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _day_label(d: date) -> str:
    return f"{_DAY_NAMES[d.weekday()]} {d.strftime('%d %b')}"


def show_calendar(cal: WorkingCalendar, start: date, end: date) -> str:
    """Print one row per day: '#' = working day, '.' = weekend or holiday.

    Returns the string and also prints to stdout.

    Args:
        cal: WorkingCalendar instance
        start: First date to show (inclusive)
        end: Last date to show (exclusive)
    """
    lines: list[str] = []
    current = start
    while current < end:
        if cal.is_working_day(current):
            mark = "#"
        elif current in cal.holidays:
            mark = "H"
        else:
            mark = "."
        lines.append(f"{_day_label(current):>10s}  {mark}")
        current += timedelta(days=1)

    result = "\n".join(lines)
    print(result)
    return result


def show_schedule(
    allocations: Sequence[DayAllocation],
    hours_per_day: float,
    cal: WorkingCalendar,
) -> str:
    """Print the schedule as one row per day, one char per hour.

    Legend: '.' = non-working day, '-' = free hour, 'A'-'Z' = task by position.
    Hours are rounded up to whole chars. Returns the string and also prints
    to stdout.
    """
    billed = [a for a in allocations if a.billed]
    if not billed:
        print("")
        return ""

    width = max(1, int(-(-hours_per_day // 1)))

    # Build per-day usage: date -> list of (label, hours) in billing order
    usage: dict[date, list[tuple[str, float]]] = {}
    for idx, alloc in enumerate(allocations):
        label = _LABEL_CHARS[idx % len(_LABEL_CHARS)]
        for day, hours in alloc.billed:
            usage.setdefault(day, []).append((label, hours))

    first = billed[0].start
    last = billed[-1].end
    lines: list[str] = []
    current = first
    while current <= last:
        if not cal.is_working_day(current):
            row = "." * width
        else:
            chars: list[str] = []
            filled = 0.0
            for label, hours in usage.get(current, []):
                filled += hours
                while len(chars) < min(width, int(-(-filled // 1))):
                    chars.append(label)
            row = "".join(chars) + "-" * (width - len(chars))
        lines.append(f"{_day_label(current):>10s}  {row}")
        current += timedelta(days=1)

    legend = [f"{_LABEL_CHARS[i % len(_LABEL_CHARS)]}={i}" for i in range(len(allocations))]
    lines.append(f"\nLegend: . = non-working, - = free, {', '.join(legend)}")

    result = "\n".join(lines)
    print(result)
    return result
