"""Solar geometry and the apparent position of the Sun."""

from __future__ import annotations

import numpy as np

from .constants import PERIHELION_OF_EARTH, PI, TO_RAD
from .julian import to_days
from .transforms import altitude, azimuth, declination, right_ascension, sidereal_time
from .types import Coords, Position

__all__ = [
    "ecliptic_longitude",
    "equation_of_center",
    "get_position",
    "solar_mean_anomaly",
    "sun_coords",
]


def solar_mean_anomaly(d):
    return (357.5291 + 0.98560028 * d) * TO_RAD


def equation_of_center(m):
    return (1.9148 * np.sin(m) + 0.02 * np.sin(2.0 * m) + 0.0003 * np.sin(3.0 * m)) * TO_RAD


def ecliptic_longitude(m):
    """Ecliptic longitude of the Sun for mean anomaly *m* (radians)."""

    return m + equation_of_center(m) + PERIHELION_OF_EARTH + PI


def sun_coords(d: float) -> Coords:
    """Equatorial coordinates of the Sun *d* days after J2000.

    The ecliptic latitude of the Sun is taken as zero and no distance is
    computed.
    """

    l = ecliptic_longitude(solar_mean_anomaly(d))
    return Coords(
        right_ascension=float(right_ascension(l, 0.0)),
        declination=float(declination(l, 0.0)),
    )


def get_position(timestamp: float, lat: float, lon: float) -> Position:
    """Compute the position of the Sun for an observer.

    Parameters
    ----------
    timestamp:
        Milliseconds since the Unix epoch.
    lat, lon:
        Geographic coordinates in degrees (east-positive longitude). Values
        are not range checked.

    Returns
    -------
    Position
        Azimuth and altitude in radians; no refraction is applied.
    """

    lw = -lon * TO_RAD
    phi = lat * TO_RAD
    d = to_days(timestamp)

    c = sun_coords(d)
    h = sidereal_time(d, lw) - c.right_ascension

    return Position(
        azimuth=float(azimuth(h, phi, c.declination)),
        altitude=float(altitude(h, phi, c.declination)),
    )
