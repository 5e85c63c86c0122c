"""
Wall-clock to UTC resolution across daylight-saving transitions.

A wall-clock value (a naive datetime) is only a label until it is resolved
against a zone. Two labels need a policy:

- Gap (spring-forward): the label never happens on the zone's clock. It is
  moved forward minute by minute to the first label that does exist.
- Fold (fall-back): the label happens twice, once under each offset. The
  earlier UTC instant wins, i.e. the larger of the two offsets is subtracted.

Every other label converts one-to-one. Detection relies on PEP 495 `fold`
semantics, so any conforming tzinfo works; zoneinfo.ZoneInfo is the expected one.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Tuple

logger = logging.getLogger(__name__)

GAP_PROBE_STEP = timedelta(minutes=1)


def _wall_clock(value: datetime) -> datetime:
    return value.replace(tzinfo=None, fold=0)


def _to_utc(wall_clock: datetime, tz: tzinfo) -> datetime:
    return wall_clock.replace(tzinfo=tz).astimezone(timezone.utc)


def is_nonexistent_time(wall_clock: datetime, tz: tzinfo) -> bool:
    """True when the label falls inside a spring-forward gap of `tz`."""

    local = _wall_clock(wall_clock)
    round_trip = _to_utc(local, tz).astimezone(tz)
    return round_trip.replace(tzinfo=None) != local


def is_ambiguous_time(wall_clock: datetime, tz: tzinfo) -> bool:
    """True when the label occurs twice in `tz` (a fall-back fold)."""

    local = _wall_clock(wall_clock)
    if is_nonexistent_time(local, tz):
        return False
    first = local.replace(tzinfo=tz).utcoffset()
    second = local.replace(tzinfo=tz, fold=1).utcoffset()
    return first != second


def ambiguous_offsets(wall_clock: datetime, tz: tzinfo) -> Tuple[timedelta, timedelta]:
    """
    The two UTC offsets an ambiguous label can carry, in occurrence order.

    Raises:
        ValueError: If the label is not ambiguous in `tz`.
    """

    local = _wall_clock(wall_clock)
    if not is_ambiguous_time(local, tz):
        raise ValueError("wall_clock is not ambiguous in the given time zone")
    first = local.replace(tzinfo=tz).utcoffset()
    second = local.replace(tzinfo=tz, fold=1).utcoffset()
    return first, second  # type: ignore[return-value]


def to_utc_robust(wall_clock: datetime, tz: tzinfo) -> datetime:
    """
    Resolve a wall-clock label in `tz` to an aware UTC datetime.

    Any tzinfo already attached to `wall_clock` is discarded; only its
    year/month/day/hour/minute/second/microsecond fields are read.

    Examples:
        >>> new_york = ZoneInfo("America/New_York")
        >>> to_utc_robust(datetime(2021, 3, 14, 2, 30), new_york)  # gap
        datetime.datetime(2021, 3, 14, 7, 0, tzinfo=datetime.timezone.utc)
        >>> to_utc_robust(datetime(2021, 11, 7, 1, 30), new_york)  # fold
        datetime.datetime(2021, 11, 7, 5, 30, tzinfo=datetime.timezone.utc)
    """

    local = _wall_clock(wall_clock)

    if is_nonexistent_time(local, tz):
        probe = local
        while is_nonexistent_time(probe, tz):
            probe += GAP_PROBE_STEP
        logger.debug(
            "Wall clock %s does not exist in %s; moved forward to %s",
            local.isoformat(),
            tz,
            probe.isoformat(),
        )
        return _to_utc(probe, tz)

    if is_ambiguous_time(local, tz):
        chosen = max(ambiguous_offsets(local, tz))
        logger.debug(
            "Wall clock %s is ambiguous in %s; using earlier offset %s",
            local.isoformat(),
            tz,
            chosen,
        )
        return (local - chosen).replace(tzinfo=timezone.utc)

    return _to_utc(local, tz)


__all__ = [
    "ambiguous_offsets",
    "is_ambiguous_time",
    "is_nonexistent_time",
    "to_utc_robust",
]
