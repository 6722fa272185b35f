"""Equatorial and horizontal coordinate transforms shared by Sun and Moon.

The expressions are written with numpy ufuncs so they broadcast over arrays
and so that ``asin``/``acos`` arguments outside ``[-1, 1]`` produce NaN
instead of raising.
"""

from __future__ import annotations

import math

import numpy as np

from .constants import OBLIQUITY_OF_EARTH, TO_RAD

__all__ = [
    "altitude",
    "astronomical_refraction",
    "azimuth",
    "declination",
    "nan_to_zero",
    "right_ascension",
    "sidereal_time",
]

_SIN_E = math.sin(OBLIQUITY_OF_EARTH)
_COS_E = math.cos(OBLIQUITY_OF_EARTH)


def right_ascension(l, b):
    """Right ascension from ecliptic longitude *l* and latitude *b* (radians)."""

    return np.arctan2(np.sin(l) * _COS_E - np.tan(b) * _SIN_E, np.cos(l))


def declination(l, b):
    """Declination from ecliptic longitude *l* and latitude *b* (radians)."""

    with np.errstate(invalid="ignore"):
        return np.arcsin(np.sin(b) * _COS_E + np.cos(b) * _SIN_E * np.sin(l))


def sidereal_time(d, lw):
    """Local sidereal time for *d* days since J2000 at west longitude *lw*."""

    return (280.16 + 360.9856235 * d) * TO_RAD - lw


def azimuth(h, phi, dec):
    """Azimuth measured from south, positive towards the west."""

    return np.arctan2(np.sin(h), np.cos(h) * np.sin(phi) - np.tan(dec) * np.cos(phi))


def altitude(h, phi, dec):
    with np.errstate(invalid="ignore"):
        return np.arcsin(np.sin(phi) * np.sin(dec) + np.cos(phi) * np.cos(dec) * np.cos(h))


def astronomical_refraction(h):
    """Refraction correction for an apparent altitude *h* (radians).

    Altitudes below the horizon are clamped to zero.
    """

    h = np.maximum(h, 0.0)
    return np.tan(0.0002967 / (h + 0.00312536 / (h + 0.08901179)))


def nan_to_zero(value) -> float:
    """Map NaN and signed zero to ``0.0``; pass any other value through."""

    value = float(value)
    if math.isnan(value) or value == 0.0:
        return 0.0
    return value
