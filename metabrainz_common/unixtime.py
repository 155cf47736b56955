"""Conversions between datetimes and Unix time (seconds since 1970-01-01T00:00:00Z)."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import overload

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@overload
def to_unix_time(value: datetime) -> int: ...


@overload
def to_unix_time(value: None) -> None: ...


def to_unix_time(value: datetime | None) -> int | None:
    """Return whole seconds since the epoch, rounding down; naive values are UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return math.floor((value - EPOCH).total_seconds())


@overload
def from_unix_time(value: int) -> datetime: ...


@overload
def from_unix_time(value: None) -> None: ...


def from_unix_time(value: int | None) -> datetime | None:
    """Return the UTC datetime for a Unix time value."""
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)
