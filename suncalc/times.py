"""Sunrise, sunset and twilight times.

A single-pass approximation of the moments the Sun crosses a set of fixed
altitudes. Events that do not happen on the requested day (polar day or
night for that altitude) come back as NaN timestamps.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from .constants import J0, J2000, PI, TO_RAD
from .julian import from_julian_day, round_half_away, to_days
from .sun import ecliptic_longitude, solar_mean_anomaly
from .transforms import declination
from .types import SunTimes, Timestamp

__all__ = ["SUN_TIME_THRESHOLDS", "SunTimeThreshold", "get_times"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SunTimeThreshold:
    """Solar altitude (degrees) that separates a morning and evening event."""

    angle: float
    rise_name: str
    set_name: str
    height_applies: bool = True


SUN_TIME_THRESHOLDS: Tuple[SunTimeThreshold, ...] = (
    SunTimeThreshold(-0.833, "sunrise", "sunset"),
    SunTimeThreshold(-0.3, "sunrise_end", "sunset_start"),
    SunTimeThreshold(-6.0, "dawn", "dusk"),
    SunTimeThreshold(-12.0, "nautical_dawn", "nautical_dusk"),
    SunTimeThreshold(-18.0, "night_end", "night"),
    SunTimeThreshold(6.0, "golden_hour_end", "golden_hour"),
)


def julian_cycle(d, lw):
    return round_half_away(d - J0 - lw / (2.0 * PI))


def approx_transit(ht, lw, n):
    return J0 + (ht + lw) / (2.0 * PI) + n


def solar_transit_j(ds, m, l):
    return J2000 + ds + 0.0053 * np.sin(m) - 0.0069 * np.sin(2.0 * l)


def hour_angle(h, phi, dec):
    with np.errstate(invalid="ignore"):
        return np.arccos((np.sin(h) - np.sin(phi) * np.sin(dec)) / (np.cos(phi) * np.cos(dec)))


def observer_angle(height):
    """Horizon dip in degrees for an observer *height* meters above the ground."""

    with np.errstate(invalid="ignore"):
        return -2.076 * np.sqrt(height) / 60.0


def get_set_j(h, lw, phi, dec, n, m, l):
    """Julian day at which the Sun sets below altitude *h* (radians)."""

    w = hour_angle(h, phi, dec)
    a = approx_transit(w, lw, n)
    return solar_transit_j(a, m, l)


def threshold_times(
    threshold: SunTimeThreshold, j_noon, dh, lw, phi, dec, n, m, l
) -> Tuple[Timestamp, Timestamp]:
    """Morning and evening timestamps at which the Sun crosses *threshold*."""

    offset = dh if threshold.height_applies else 0.0
    h0 = (threshold.angle + offset) * PI / 180.0
    j_set = get_set_j(h0, lw, phi, dec, n, m, l)
    j_rise = j_noon - (j_set - j_noon)
    return from_julian_day(j_rise), from_julian_day(j_set)


def get_times(timestamp: float, lat: float, lon: float, height: float = 0.0) -> SunTimes:
    """Compute the solar events of the day containing *timestamp*.

    Parameters
    ----------
    timestamp:
        Milliseconds since the Unix epoch.
    lat, lon:
        Geographic coordinates in degrees (east-positive longitude).
    height:
        Observer height above the horizon in meters.

    Returns
    -------
    SunTimes
        Epoch-millisecond timestamps; an event that does not occur is NaN.
    """

    lw = -lon * TO_RAD
    phi = lat * TO_RAD
    dh = observer_angle(height)

    d = to_days(timestamp)
    n = julian_cycle(d, lw)
    ds = approx_transit(0.0, lw, n)

    m = solar_mean_anomaly(ds)
    l = ecliptic_longitude(m)
    dec = declination(l, 0.0)

    j_noon = solar_transit_j(ds, m, l)

    events: Dict[str, Timestamp] = {
        "solar_noon": from_julian_day(j_noon),
        "nadir": from_julian_day(j_noon - 0.5),
    }
    for threshold in SUN_TIME_THRESHOLDS:
        rise, set_ = threshold_times(threshold, j_noon, dh, lw, phi, dec, n, m, l)
        events[threshold.rise_name] = rise
        events[threshold.set_name] = set_

    if LOGGER.isEnabledFor(logging.DEBUG):
        absent = sorted(
            name
            for name, value in events.items()
            if isinstance(value, float) and math.isnan(value)
        )
        if absent:
            LOGGER.debug(
                json.dumps({"event": "sun_times_absent", "lat": lat, "lon": lon, "absent": absent})
            )

    return SunTimes(**events)
