#!/usr/bin/env python
"""Visual verification report for effort-scheduler.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Reference data (day table)
  2. Calendar configurations (holidays, weekend policy, ASCII fortnight)
  3. Layer 1 tests (next_working_day)  -- input/output tables
  4. Layer 2 tests (schedule_all scenarios)  -- input/output tables + ASCII schedule
"""

from __future__ import annotations

import io
import json
import sys
from contextlib import redirect_stdout
from datetime import date, datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from effort_scheduler.allocator import plan
from effort_scheduler.calendar import WorkingCalendar, next_working_day
from effort_scheduler.debug import show_calendar, show_schedule
from effort_scheduler.loaders import config_from_dict


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_ref = _load(FIXTURES / "reference.json")
_cals = _load(FIXTURES / "calendars.json")

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _fmt_day(d: date) -> str:
    """Format a date as 'Tue 02 Jan 2024'."""
    return f"{DAY_NAMES[d.weekday()]} {d.strftime('%d %b %Y')}"


def _make_cal(name: str) -> WorkingCalendar:
    config = _cals[name]
    return WorkingCalendar(
        holidays=frozenset(date.fromisoformat(h) for h in config["holidays"]),
        include_weekends=config["include_weekends"],
    )


def _indented(text: str, indent: int = 4) -> str:
    pad = " " * indent
    return "\n".join(pad + line if line else line for line in text.splitlines())


def _quiet(fn, *args) -> str:
    """Call a debug view without its own stdout echo."""
    with redirect_stdout(io.StringIO()):
        return fn(*args)


# ---------------------------------------------------------------------------
# Section 1: Reference Data
# ---------------------------------------------------------------------------
def section_reference():
    banner("REFERENCE DATA")
    print(f"\n    {_ref['description']}")
    print(f"    Work hours/day: {_ref['work_hours_per_day']}")

    heading("Day Mapping")
    rows = []
    for d in _ref["days"]:
        day = date.fromisoformat(d["date"])
        rows.append([d["name"], d["date"], DAY_NAMES[day.weekday()]])
    table(["Name", "Date", "Day"], rows)


# ---------------------------------------------------------------------------
# Section 2: Calendar Configurations
# ---------------------------------------------------------------------------
def section_calendars():
    banner("CALENDAR CONFIGURATIONS")

    first = date.fromisoformat(_ref["days"][0]["date"])
    last = date.fromisoformat(_ref["days"][-1]["date"])

    for cal_name, config in _cals.items():
        heading(f"Calendar: {cal_name}")
        print(f"    {config['description']}")
        weekends = "worked" if config["include_weekends"] else "excluded"
        holidays = ", ".join(config["holidays"]) or "(none)"
        print(f"    Weekends: {weekends}    Holidays: {holidays}\n")

        cal = _make_cal(cal_name)
        print(_indented(_quiet(show_calendar, cal, first, last)))


# ---------------------------------------------------------------------------
# Section 3: Layer 1  -- Calendar Stepping
# ---------------------------------------------------------------------------
def section_calendar_stepping():
    banner("LAYER 1: CALENDAR STEPPING")

    data = _load(SCENARIOS / "calendar.json")

    heading("Function: next_working_day(day, holidays, include_weekends) -> date")
    print("    First working day strictly after the given day.\n")
    rows = []
    for s in data["next_working_day"]:
        cal = _make_cal(s["calendar"])
        start = date.fromisoformat(s["date"])
        result = next_working_day(start, cal.holidays, cal.include_weekends)
        expected = date.fromisoformat(s["expected"])
        match = "OK" if result == expected else "FAIL"
        rows.append([
            s["id"], s["calendar"], _fmt_day(start), _fmt_day(result), match, s["notes"],
        ])
    table(["ID", "Calendar", "From", "Result", "", "Notes"], rows)


# ---------------------------------------------------------------------------
# Section 4: Layer 2  -- Allocation
# ---------------------------------------------------------------------------
def section_schedule():
    banner("LAYER 2: HOUR ALLOCATION")

    data = _load(SCENARIOS / "schedule.json")

    heading("Function: schedule_all(tasks, config) -> tasks with start/end")
    print("    Each task fills the cursor's day before rolling to the next working day.\n")
    rows = []
    for s in data["schedule_all"]:
        config = config_from_dict(s["config"])
        allocations = plan(s["tasks"], config)
        got = [(a.start.isoformat(), a.end.isoformat()) for a in allocations]
        expected = [tuple(pair) for pair in s["expected"]]
        match = "OK" if got == expected else "FAIL"
        efforts = ",".join(str(t.get("effort", "-")) for t in s["tasks"]) or "(none)"
        ends = ", ".join(end for _, end in got) or "(none)"
        rows.append([s["id"], s["config"]["project_start_date"], efforts, ends, match])
    table(["ID", "Start", "Efforts", "End dates", ""], rows)

    for s in data["schedule_all"]:
        if not s["id"].startswith("scenario_"):
            continue
        heading(f"Schedule: {s['id']}")
        print(f"    {s['notes']}\n")
        config = config_from_dict(s["config"])
        allocations = plan(s["tasks"], config)
        view = _quiet(
            show_schedule, allocations, config.work_hours_per_day,
            WorkingCalendar.from_config(config),
        )
        print(_indented(view))


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("EFFORT-SCHEDULER   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_reference()
    section_calendars()
    section_calendar_stepping()
    section_schedule()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
