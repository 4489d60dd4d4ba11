"""Boundary: date-like values -> day-granularity ``datetime.date``."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Union

DayLike = Union[date, datetime, str]


def _reject_aware(dt: datetime, name: str) -> None:
    """Reject timezone-aware datetimes."""
    if dt.tzinfo is not None:
        raise TypeError(
            f"{name} must be a naive datetime (no tzinfo), "
            f"got tzinfo={dt.tzinfo!r}. "
            f"All dates are local calendar dates."
        )


def to_day(value: DayLike, name: str = "value") -> date:
    """Normalise a date-like value to a plain ``date``.

    Accepts a ``date``, a naive ``datetime`` (time of day is dropped) or an
    ISO string ("2024-01-02" or "2024-01-02T09:30").

    Raises TypeError for aware datetimes and unsupported types.
    Raises ValueError if a string does not parse.
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        _reject_aware(value, name)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) > 10:
                parsed = datetime.fromisoformat(text)
                _reject_aware(parsed, name)
                return parsed.date()
            return date.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"{name}: invalid date {value!r} ({e})") from e
    raise TypeError(
        f"{name} must be a date, naive datetime or ISO string, "
        f"got {type(value).__name__}"
    )


def to_days(values: Iterable[DayLike], name: str = "holidays") -> frozenset[date]:
    """Normalise a collection of date-like values. Duplicates collapse."""
    return frozenset(to_day(v, name) for v in values)
