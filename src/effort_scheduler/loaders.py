"""Configuration loading: JSON files and free-text holiday lists."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from effort_scheduler.days import to_day, to_days
from effort_scheduler.schema import validate_config
from effort_scheduler.types import (
    DEFAULT_MAX_SEARCH_DAYS,
    DEFAULT_WORK_HOURS_PER_DAY,
    ScheduleConfig,
)

logger = logging.getLogger(__name__)


def config_from_dict(raw: dict, source: str = "configuration") -> ScheduleConfig:
    """Build a ScheduleConfig from a raw dict.

    The dict has the JSON contract format:
    {
        "project_start_date": "2024-01-02",
        "holidays": ["2024-01-03", ...],
        "include_weekends": false,
        "work_hours_per_day": 8,
        "max_search_days": 365
    }

    Only project_start_date is required. Raises ValueError if validation fails.
    """
    errors = validate_config(raw)
    if errors:
        raise ValueError(
            f"Validation errors in {source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return ScheduleConfig(
        project_start_date=to_day(raw["project_start_date"], "project_start_date"),
        holidays=to_days(raw.get("holidays", [])),
        include_weekends=raw.get("include_weekends", False),
        work_hours_per_day=raw.get("work_hours_per_day", DEFAULT_WORK_HOURS_PER_DAY),
        max_search_days=raw.get("max_search_days", DEFAULT_MAX_SEARCH_DAYS),
    )


def load_config_json(path: str | Path) -> ScheduleConfig:
    """Load a ScheduleConfig from a JSON file.

    A top-level "config" object is used if present, so a scenario file that
    bundles configuration with tasks can be loaded directly.

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    raw = data.get("config", data) if isinstance(data, dict) else data
    return config_from_dict(raw, source=path.name)


def parse_holidays(text: str, separator: str = ",") -> frozenset[date]:
    """Parse a separated list of ISO dates, e.g. "2024-01-01, 2024-12-25".

    Blank entries are ignored. Entries that do not parse are skipped with a
    warning. Duplicates collapse.
    """
    holidays: set[date] = set()
    for entry in text.split(separator):
        entry = entry.strip()
        if not entry:
            continue
        try:
            holidays.add(to_day(entry))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid holiday date %r", entry)
    return frozenset(holidays)
