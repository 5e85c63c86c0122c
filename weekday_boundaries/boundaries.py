"""
Previous/next day-of-week boundaries.

Plain variants work on the value's own wall clock and return the same kind of
datetime they were given (same tzinfo, or naive). Zone variants anchor the
calendar in a time zone and return aware UTC datetimes.

Rules implemented here:
- A same-weekday input never matches itself: "previous" is always 1..7 days
  earlier and "next" always 1..7 days later.
- Start variants zero every time field; end variants are one microsecond before
  the following midnight.
- Zone variants compute the target date on the zone's local calendar and resolve
  its midnight with `to_utc_robust` (gaps move forward, folds take the earlier
  instant). End = resolved start + 1 day - 1 microsecond, measured in UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone

from .day_bounds import MINIMAL_TICK, ONE_DAY, add_days, end_of_day, start_of_day
from .day_of_week import DayOfWeek, DayOfWeekLike, days_since, days_until
from .time import TimeZoneLike, require_aware_timestamp, require_timezone
from .zone_resolution import to_utc_robust


def previous_day_of_week(value: datetime, day_of_week: DayOfWeekLike) -> datetime:
    """
    Previous occurrence of `day_of_week` before `value`, same time of day.

    The result is always strictly in the past (never the same day).
    """

    target = DayOfWeek.from_value(day_of_week)
    return add_days(value, -days_since(DayOfWeek.for_datetime(value), target))


def next_day_of_week(value: datetime, day_of_week: DayOfWeekLike) -> datetime:
    """
    Next occurrence of `day_of_week` after `value`, same time of day.

    The result is always strictly in the future (never the same day).
    """

    target = DayOfWeek.from_value(day_of_week)
    return add_days(value, days_until(DayOfWeek.for_datetime(value), target))


def start_of_previous_day_of_week(value: datetime, day_of_week: DayOfWeekLike) -> datetime:
    return start_of_day(previous_day_of_week(value, day_of_week))


def start_of_next_day_of_week(value: datetime, day_of_week: DayOfWeekLike) -> datetime:
    return start_of_day(next_day_of_week(value, day_of_week))


def end_of_previous_day_of_week(value: datetime, day_of_week: DayOfWeekLike) -> datetime:
    return end_of_day(previous_day_of_week(value, day_of_week))


def end_of_next_day_of_week(value: datetime, day_of_week: DayOfWeekLike) -> datetime:
    return end_of_day(next_day_of_week(value, day_of_week))


def _start_of_tz_day_of_week(
    instant: datetime,
    day_of_week: DayOfWeekLike,
    tz: TimeZoneLike | None,
    *,
    following: bool,
) -> datetime:
    zone = require_timezone("tz", tz)
    require_aware_timestamp("instant", instant)
    target = DayOfWeek.from_value(day_of_week)

    # Anchor on the zone's local calendar
    local = instant.astimezone(timezone.utc).astimezone(zone)
    current = DayOfWeek.for_datetime(local)

    if following:
        delta_days = days_until(current, target)
    else:
        delta_days = -days_since(current, target)

    local_midnight = add_days(datetime(local.year, local.month, local.day), delta_days)
    return to_utc_robust(local_midnight, zone)


def start_of_previous_tz_day_of_week(
    instant: datetime, day_of_week: DayOfWeekLike, tz: TimeZoneLike | None
) -> datetime:
    """
    UTC instant at which the previous `day_of_week` starts in `tz`.

    Args:
        instant: Timezone-aware reference instant (any offset)
        day_of_week: Target weekday (DayOfWeek, day name, or 0..6)
        tz: tzinfo or IANA zone name

    Raises:
        ValueError: If tz is None or unknown, or instant is naive
    """

    return _start_of_tz_day_of_week(instant, day_of_week, tz, following=False)


def start_of_next_tz_day_of_week(
    instant: datetime, day_of_week: DayOfWeekLike, tz: TimeZoneLike | None
) -> datetime:
    """UTC instant at which the next `day_of_week` starts in `tz`."""

    return _start_of_tz_day_of_week(instant, day_of_week, tz, following=True)


def end_of_previous_tz_day_of_week(
    instant: datetime, day_of_week: DayOfWeekLike, tz: TimeZoneLike | None
) -> datetime:
    """UTC instant one microsecond before a day after the previous `day_of_week` starts in `tz`."""

    start = _start_of_tz_day_of_week(instant, day_of_week, tz, following=False)
    return start + ONE_DAY - MINIMAL_TICK


def end_of_next_tz_day_of_week(
    instant: datetime, day_of_week: DayOfWeekLike, tz: TimeZoneLike | None
) -> datetime:
    """UTC instant one microsecond before a day after the next `day_of_week` starts in `tz`."""

    start = _start_of_tz_day_of_week(instant, day_of_week, tz, following=True)
    return start + ONE_DAY - MINIMAL_TICK


__all__ = [
    "end_of_next_day_of_week",
    "end_of_next_tz_day_of_week",
    "end_of_previous_day_of_week",
    "end_of_previous_tz_day_of_week",
    "next_day_of_week",
    "previous_day_of_week",
    "start_of_next_day_of_week",
    "start_of_next_tz_day_of_week",
    "start_of_previous_day_of_week",
    "start_of_previous_tz_day_of_week",
]
