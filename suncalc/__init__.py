"""Sun and Moon positions, sunlight phases and lunar illumination."""

from .julian import from_julian_day, from_timestamp, to_days, to_julian_day, to_timestamp
from .moon import (
    get_moon_illumination,
    get_moon_position,
    lunar_ecliptic_longitude,
    lunar_mean_anomaly,
    lunar_mean_distance,
    moon_coords,
)
from .sun import get_position, sun_coords
from .times import SUN_TIME_THRESHOLDS, get_times
from .transforms import azimuth
from .types import Coords, Illumination, Position, SunTimes

__version__ = "1.0.0"

__all__ = [
    "Coords",
    "Illumination",
    "Position",
    "SUN_TIME_THRESHOLDS",
    "SunTimes",
    "azimuth",
    "from_julian_day",
    "from_timestamp",
    "get_moon_illumination",
    "get_moon_position",
    "get_position",
    "get_times",
    "lunar_ecliptic_longitude",
    "lunar_mean_anomaly",
    "lunar_mean_distance",
    "moon_coords",
    "sun_coords",
    "to_days",
    "to_julian_day",
    "to_timestamp",
]
