"""Input validation for raw schedule configuration dicts."""

from __future__ import annotations

import math

from effort_scheduler.days import to_day

_KNOWN_KEYS = {
    "project_start_date",
    "holidays",
    "include_weekends",
    "work_hours_per_day",
    "max_search_days",
}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_holidays(holidays: object) -> list[str]:
    """Validate a raw holiday list. Returns list of error messages.

    Checks:
    - holidays is a list of strings
    - each entry parses as an ISO date or naive datetime
    """
    if not isinstance(holidays, list):
        return [f"holidays must be a list, got {type(holidays).__name__}"]

    errors: list[str] = []
    for i, entry in enumerate(holidays):
        if not isinstance(entry, str):
            errors.append(f"Holiday {i}: expected ISO date string, got {entry!r}")
            continue
        try:
            to_day(entry)
        except (TypeError, ValueError):
            errors.append(f"Holiday {i}: invalid date '{entry}'")
    return errors


def validate_config(raw: dict) -> list[str]:
    """Validate a raw configuration dict. Returns list of error messages
    (empty = valid).

    Checks:
    - project_start_date is present and a date or naive datetime ISO string
    - work_hours_per_day, if given, is a finite number > 0
    - include_weekends, if given, is boolean
    - max_search_days, if given, is an integer >= 1
    - holidays, if given, is a list of ISO dates
    - no unknown keys
    """
    if not isinstance(raw, dict):
        return [f"configuration must be an object, got {type(raw).__name__}"]

    errors: list[str] = []

    for key in sorted(set(raw) - _KNOWN_KEYS):
        errors.append(f"Unknown key: {key}")

    if "project_start_date" not in raw:
        errors.append("Missing 'project_start_date'")
    else:
        start = raw["project_start_date"]
        try:
            to_day(start)
        except (TypeError, ValueError):
            errors.append(f"project start date is not valid: {start!r}")

    if "work_hours_per_day" in raw:
        hours = raw["work_hours_per_day"]
        if not _is_number(hours) or not math.isfinite(hours) or hours <= 0:
            errors.append(
                f"work hours per day must be greater than 0, got {hours!r}"
            )

    if "include_weekends" in raw and not isinstance(raw["include_weekends"], bool):
        errors.append("'include_weekends' must be boolean")

    if "max_search_days" in raw:
        steps = raw["max_search_days"]
        if not isinstance(steps, int) or isinstance(steps, bool) or steps < 1:
            errors.append(f"'max_search_days' must be an integer >= 1, got {steps!r}")

    if "holidays" in raw:
        errors.extend(validate_holidays(raw["holidays"]))

    return errors
