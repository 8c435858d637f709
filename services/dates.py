# services/dates.py

from __future__ import annotations

import datetime as dt
from typing import List

MONDAY = 0
SATURDAY = 5
SUNDAY = 6

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def add_days(day: dt.date, n: int) -> dt.date:
    return day + dt.timedelta(days=n)


def days_between(start: dt.date, end: dt.date) -> int:
    """Signed difference in whole days (end - start)."""
    return (end - start).days


def weekday(day: dt.date) -> int:
    """Day of week, Monday = 0 … Sunday = 6."""
    return day.weekday()


def weekday_name(day: dt.date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def trip_days(start: dt.date, end: dt.date) -> List[dt.date]:
    """
    Every calendar day from start to end, both included.
    Empty when end precedes start.
    """
    return [add_days(start, i) for i in range(days_between(start, end) + 1)]


def split_weeks(days: List[dt.date]) -> List[List[dt.date]]:
    """
    Cut a run of consecutive days into Monday-based calendar weeks.
    The first chunk is partial when the run does not start on a Monday.
    """
    weeks: List[List[dt.date]] = []
    current: List[dt.date] = []
    for i, day in enumerate(days):
        if i > 0 and weekday(day) == MONDAY:
            weeks.append(current)
            current = []
        current.append(day)
    if current:
        weeks.append(current)
    return weeks
