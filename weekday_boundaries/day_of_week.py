"""
Days of the week and the distance rules between them.

Rules implemented here:
- Weekdays are ordered Monday (0) .. Sunday (6), the datetime.weekday()
  convention. The order is only used for modular distance.
- days_since(current, target) = (current - target) mod 7, with 0 rolled to 7
- days_until(current, target) = (target - current) mod 7, with 0 rolled to 7

A same-weekday match never yields 0: it always moves to the adjacent week.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Union

DAYS_PER_WEEK = 7


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def number(self) -> int:
        """Position in the week, Monday = 0 .. Sunday = 6."""
        return _INDEX[self]

    @staticmethod
    def for_datetime(value: date) -> "DayOfWeek":
        """Weekday of a date or datetime, read from its own wall clock."""

        return _BY_INDEX[value.weekday()]

    @staticmethod
    def from_value(value: "DayOfWeekLike") -> "DayOfWeek":
        """
        Coerce a DayOfWeek, a day name, or a weekday number.

        Names are matched case-insensitively, in full ("Tuesday") or as the
        three-letter abbreviation ("Tue"). Numbers follow datetime.weekday().
        """

        if isinstance(value, DayOfWeek):
            return value
        if isinstance(value, bool):
            raise ValueError("day_of_week must not be a bool")
        if isinstance(value, int):
            if not 0 <= value < DAYS_PER_WEEK:
                raise ValueError("day_of_week must be in 0..6 (Monday = 0)")
            return _BY_INDEX[value]
        if isinstance(value, str):
            day = _BY_NAME.get(value.strip().lower())
            if day is None:
                raise ValueError(f"day_of_week is not a day name: {value!r}")
            return day
        raise ValueError("day_of_week must be a DayOfWeek, a day name or 0..6")


DayOfWeekLike = Union[DayOfWeek, str, int]

_BY_INDEX = tuple(DayOfWeek)
_INDEX = {day: i for i, day in enumerate(_BY_INDEX)}
_BY_NAME = {
    **{day.value.lower(): day for day in DayOfWeek},
    **{day.value[:3].lower(): day for day in DayOfWeek},
}


def days_since(current: DayOfWeek, target: DayOfWeek) -> int:
    """Days back from `current` to the previous `target` (1..7)."""

    delta = (current.number - target.number) % DAYS_PER_WEEK
    return delta or DAYS_PER_WEEK


def days_until(current: DayOfWeek, target: DayOfWeek) -> int:
    """Days forward from `current` to the next `target` (1..7)."""

    delta = (target.number - current.number) % DAYS_PER_WEEK
    return delta or DAYS_PER_WEEK


__all__ = [
    "DAYS_PER_WEEK",
    "DayOfWeek",
    "DayOfWeekLike",
    "days_since",
    "days_until",
]
