"""
Weekday Boundaries.

Previous/next day-of-week boundaries, optionally anchored to a time zone and
returned as UTC instants.
"""

from __future__ import annotations

from .boundaries import (
    end_of_next_day_of_week,
    end_of_next_tz_day_of_week,
    end_of_previous_day_of_week,
    end_of_previous_tz_day_of_week,
    next_day_of_week,
    previous_day_of_week,
    start_of_next_day_of_week,
    start_of_next_tz_day_of_week,
    start_of_previous_day_of_week,
    start_of_previous_tz_day_of_week,
)
from .day_bounds import MINIMAL_TICK, add_days, end_of_day, start_of_day
from .day_of_week import DayOfWeek, days_since, days_until
from .zone_resolution import (
    ambiguous_offsets,
    is_ambiguous_time,
    is_nonexistent_time,
    to_utc_robust,
)

__version__ = "1.0.0"

__all__ = [
    "DayOfWeek",
    "MINIMAL_TICK",
    "__version__",
    "add_days",
    "ambiguous_offsets",
    "days_since",
    "days_until",
    "end_of_day",
    "end_of_next_day_of_week",
    "end_of_next_tz_day_of_week",
    "end_of_previous_day_of_week",
    "end_of_previous_tz_day_of_week",
    "is_ambiguous_time",
    "is_nonexistent_time",
    "next_day_of_week",
    "previous_day_of_week",
    "start_of_day",
    "start_of_next_day_of_week",
    "start_of_next_tz_day_of_week",
    "start_of_previous_day_of_week",
    "start_of_previous_tz_day_of_week",
    "to_utc_robust",
]
