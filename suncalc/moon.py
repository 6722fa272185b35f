"""Lunar geometry, position and illumination.

Low-precision lunar theory after http://aa.quae.nl/en/reken/hemelpositie.html,
good to a fraction of a degree for dates near J2000.
"""

from __future__ import annotations

import math

import numpy as np

from .constants import PI, SUN_DISTANCE_KM, TO_RAD
from .julian import to_days
from .sun import sun_coords
from .transforms import (
    altitude,
    astronomical_refraction,
    azimuth,
    declination,
    nan_to_zero,
    right_ascension,
    sidereal_time,
)
from .types import Coords, Illumination, Position

__all__ = [
    "get_moon_illumination",
    "get_moon_position",
    "lunar_ecliptic_longitude",
    "lunar_mean_anomaly",
    "lunar_mean_distance",
    "moon_coords",
]


def lunar_mean_anomaly(d):
    return (134.963 + 13.064993 * d) * TO_RAD


def lunar_ecliptic_longitude(d):
    return (218.316 + 13.176396 * d) * TO_RAD


def lunar_mean_distance(d):
    return (93.272 + 13.229350 * d) * TO_RAD


def moon_coords(d: float) -> Coords:
    """Geocentric equatorial coordinates of the Moon *d* days after J2000."""

    l = lunar_ecliptic_longitude(d)
    m = lunar_mean_anomaly(d)
    f = lunar_mean_distance(d)

    lng = l + TO_RAD * 6.289 * np.sin(m)
    lat = TO_RAD * 5.128 * np.sin(f)
    distance = 385001.0 - 20905.0 * np.cos(m)  # km

    return Coords(
        right_ascension=float(right_ascension(lng, lat)),
        declination=float(declination(lng, lat)),
        distance=nan_to_zero(distance),
    )


def get_moon_position(timestamp: float, lat: float, lon: float) -> Position:
    """Compute the position of the Moon for an observer.

    The altitude includes atmospheric refraction. The parallactic angle
    follows formula 14.1 of Meeus, *Astronomical Algorithms* (2nd ed.).
    """

    lw = TO_RAD * -lon
    phi = TO_RAD * lat
    d = to_days(timestamp)

    c = moon_coords(d)
    h = sidereal_time(d, lw) - c.right_ascension
    alt = altitude(h, phi, c.declination)
    alt = alt + astronomical_refraction(alt)

    pa = np.arctan2(
        np.sin(h), np.tan(phi) * np.cos(c.declination) - np.sin(c.declination) * np.cos(h)
    )

    return Position(
        azimuth=float(azimuth(h, phi, c.declination)),
        altitude=float(alt),
        distance=nan_to_zero(c.distance),
        parallactic_angle=nan_to_zero(pa),
    )


def get_moon_illumination(timestamp: float) -> Illumination:
    """Compute the illuminated fraction, phase and bright-limb angle.

    ``phase`` runs from 0 (new moon) through 0.5 (full moon) back to 1.
    A negative ``angle`` means the Moon is waxing.
    """

    d = to_days(timestamp)
    s = sun_coords(d)
    m = moon_coords(d)

    dra = s.right_ascension - m.right_ascension
    with np.errstate(invalid="ignore"):
        phi = np.arccos(
            math.sin(s.declination) * math.sin(m.declination)
            + math.cos(s.declination) * math.cos(m.declination) * math.cos(dra)
        )
    inc = np.arctan2(SUN_DISTANCE_KM * np.sin(phi), m.distance - SUN_DISTANCE_KM * np.cos(phi))
    angle = math.atan2(
        math.cos(s.declination) * math.sin(dra),
        math.sin(s.declination) * math.cos(m.declination)
        - math.cos(s.declination) * math.sin(m.declination) * math.cos(dra),
    )

    sign = -1.0 if angle < 0.0 else 1.0

    return Illumination(
        fraction=nan_to_zero((1.0 + np.cos(inc)) / 2.0),
        phase=float(0.5 + 0.5 * inc * sign / PI),
        angle=nan_to_zero(angle),
    )
