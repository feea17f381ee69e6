"""Day-of-week schedule helpers.

Schedules are stored as comma-separated day numbers with Sunday as 0 and
Saturday as 6, e.g. ``"1,3,5"`` for Monday, Wednesday and Friday.
"""

from collections.abc import Iterable
from datetime import date

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
FULL_DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

ALL_DAYS = "0,1,2,3,4,5,6"
WEEKDAYS = "1,2,3,4,5"
WEEKENDS = "0,6"

_DAYS_IN_WEEK = 7
_MAX_LISTED_DAYS = 3


def parse_schedule_days(csv: str | None) -> list[int]:
    """Parse a schedule string into sorted day numbers.

    An empty schedule means every day. Chunks that are not day numbers are
    dropped.
    """
    if not csv or not csv.strip():
        return list(range(_DAYS_IN_WEEK))
    days = []
    for chunk in csv.split(","):
        value = chunk.strip()
        if value.isdecimal() and int(value) < _DAYS_IN_WEEK:
            days.append(int(value))
    return sorted(days)


def format_schedule_days(days: Iterable[int]) -> str:
    """Serialize day numbers into a schedule string."""
    return ",".join(str(day) for day in sorted(d for d in days if 0 <= d <= 6))


def is_scheduled_for_day(schedule_days: str | None, day: int) -> bool:
    """Return True if the schedule includes the given day number."""
    return day in parse_schedule_days(schedule_days)


def schedule_label(schedule_days: str | None) -> str:
    """Return a short human-readable description of a schedule."""
    days = parse_schedule_days(schedule_days)
    unique = set(days)
    if len(days) == _DAYS_IN_WEEK:
        return "Every day"
    if not days:
        return "Never"
    if len(days) == 5 and unique == {1, 2, 3, 4, 5}:
        return "Weekdays"
    if len(days) == 2 and unique == {0, 6}:
        return "Weekends"
    if len(days) <= _MAX_LISTED_DAYS:
        return ", ".join(DAY_NAMES[day] for day in days)
    return f"{len(days)} days/week"


def day_of_week(value: date) -> int:
    """Return the Sunday-based day number for a date."""
    return value.isoweekday() % _DAYS_IN_WEEK
