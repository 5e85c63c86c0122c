"""
Time argument validation (pure).

Centralized validation helpers for timestamps and time-zone descriptors.

Behavior and error messages must remain consistent across the package.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TimeZoneLike = Union[tzinfo, str]


def require_aware_timestamp(name: str, value: datetime) -> None:
    """
    Enforces that a timestamp names a point on the UTC scale.

    Invariants:
    - Timestamps must be timezone-aware (any offset is accepted).
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")


def require_timezone(name: str, value: TimeZoneLike | None) -> tzinfo:
    """
    Resolve a time-zone descriptor, failing fast when it is absent.

    Accepts any tzinfo (ZoneInfo in practice) or an IANA zone name.

    Examples:
        >>> require_timezone("tz", "America/Chicago")
        ZoneInfo(key='America/Chicago')

        >>> require_timezone("tz", None)
        Traceback (most recent call last):
        ...
        ValueError: tz is required
    """

    if value is None:
        raise ValueError(f"{name} is required")
    if isinstance(value, tzinfo):
        return value
    if isinstance(value, str):
        key = value.strip()
        if not key:
            raise ValueError(f"{name} must not be blank")
        try:
            return ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"{name} is not a known time zone: {value!r}") from exc
    raise ValueError(f"{name} must be a tzinfo or an IANA time zone name")


__all__ = [
    "TimeZoneLike",
    "require_aware_timestamp",
    "require_timezone",
]
