"""Immutable result values returned by the public calculations."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Union

# Epoch milliseconds; NaN when the event does not occur on that day.
Timestamp = Union[int, float]


@dataclass(frozen=True)
class Position:
    """Horizontal position of a body, angles in radians.

    ``azimuth`` is measured from south and grows towards the west.
    ``distance`` (km) and ``parallactic_angle`` are only set for the Moon.
    """

    azimuth: float
    altitude: float
    distance: float = 0.0
    parallactic_angle: float = 0.0


@dataclass(frozen=True)
class Coords:
    """Geocentric equatorial coordinates."""

    right_ascension: float
    declination: float
    distance: float = 0.0


@dataclass(frozen=True)
class Illumination:
    fraction: float
    phase: float
    angle: float


@dataclass(frozen=True)
class SunTimes:
    """Solar events of one day as epoch-millisecond timestamps."""

    solar_noon: Timestamp
    nadir: Timestamp
    sunrise: Timestamp
    sunset: Timestamp
    sunrise_end: Timestamp
    sunset_start: Timestamp
    dawn: Timestamp
    dusk: Timestamp
    nautical_dawn: Timestamp
    nautical_dusk: Timestamp
    night_end: Timestamp
    night: Timestamp
    golden_hour_end: Timestamp
    golden_hour: Timestamp

    def as_dict(self) -> Dict[str, Timestamp]:
        return asdict(self)
