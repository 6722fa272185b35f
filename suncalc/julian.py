"""Conversions between epoch milliseconds and Julian days."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import Optional, Union

import numpy as np

from .constants import J1970, J2000, MILLISECONDS_PER_DAY

__all__ = [
    "from_julian_day",
    "from_timestamp",
    "round_half_away",
    "to_days",
    "to_julian_day",
    "to_timestamp",
]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def round_half_away(value):
    """Round to the nearest integer, halves away from zero.

    ``numpy.round`` and the builtin :func:`round` both round halves to even,
    which shifts event times by a millisecond on exact ties.
    """

    return np.copysign(np.floor(np.abs(value) + 0.5), value)


def to_julian_day(timestamp: float) -> float:
    return timestamp / MILLISECONDS_PER_DAY - 0.5 + J1970


def from_julian_day(j: float) -> Union[int, float]:
    """Return the epoch-millisecond timestamp of Julian day *j*.

    Non-finite inputs are returned as NaN so that callers can detect events
    that do not happen.
    """

    value = (j + 0.5 - J1970) * MILLISECONDS_PER_DAY
    if not math.isfinite(value):
        return math.nan
    return int(round_half_away(value))


def to_days(timestamp: float) -> float:
    """Days elapsed since the J2000 epoch."""

    return to_julian_day(timestamp) - J2000


def to_timestamp(dt: datetime) -> int:
    """Convert a timezone-aware datetime to epoch milliseconds."""

    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return (dt.astimezone(UTC) - _EPOCH) // timedelta(milliseconds=1)


def from_timestamp(timestamp: Union[int, float]) -> Optional[datetime]:
    """Convert epoch milliseconds to a UTC datetime, ``None`` for NaN."""

    if isinstance(timestamp, float) and math.isnan(timestamp):
        return None
    return _EPOCH + timedelta(milliseconds=int(timestamp))
