"""
Calendar-day arithmetic and day boundaries.

All arithmetic is on the wall clock of the value's own tzinfo: adding a day
keeps the time of day, and the offset is whatever that tzinfo reports for the
new wall time. Naive values stay naive.
"""

from __future__ import annotations

from datetime import datetime, timedelta

# Smallest step datetime can represent.
MINIMAL_TICK = timedelta(microseconds=1)

ONE_DAY = timedelta(days=1)


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


def start_of_day(value: datetime) -> datetime:
    """Midnight of the value's calendar date, same tzinfo."""

    return value.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def end_of_day(value: datetime) -> datetime:
    """Last representable instant before the following midnight."""

    return start_of_day(value) + ONE_DAY - MINIMAL_TICK


__all__ = [
    "MINIMAL_TICK",
    "ONE_DAY",
    "add_days",
    "end_of_day",
    "start_of_day",
]
