from __future__ import annotations

import math
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from suncalc import (
    get_moon_illumination,
    get_moon_position,
    lunar_mean_anomaly,
    moon_coords,
    to_days,
)
from suncalc.transforms import altitude, astronomical_refraction, sidereal_time

MARCH_5_2013 = 1362441600000
LAT = 50.5
LON = 30.5

FULL_MOON_2013_04_25 = 1366919820000  # 19:57 UTC
NEW_MOON_2013_05_10 = 1368145680000  # 00:28 UTC
HOUR_MS = 3_600_000


def test_reference_moon_position():
    position = get_moon_position(MARCH_5_2013, LAT, LON)
    assert position.azimuth == pytest.approx(-0.9783999522438226, abs=1e-5)
    assert position.distance == pytest.approx(364121.37256256194, rel=1e-9)


def test_moon_altitude_includes_refraction():
    d = to_days(MARCH_5_2013)
    coords = moon_coords(d)
    h = sidereal_time(d, math.radians(-LON)) - coords.right_ascension
    geometric = altitude(h, math.radians(LAT), coords.declination)
    position = get_moon_position(MARCH_5_2013, LAT, LON)
    assert position.altitude == pytest.approx(
        geometric + astronomical_refraction(geometric), abs=1e-12
    )
    assert position.altitude > geometric


def test_parallactic_angle_is_set():
    position = get_moon_position(MARCH_5_2013, LAT, LON)
    assert -math.pi <= position.parallactic_angle <= math.pi
    assert position.parallactic_angle != 0.0


def test_moon_distance_range():
    for day in range(0, 30):
        coords = moon_coords(to_days(MARCH_5_2013) + day)
        assert 385001.0 - 20905.0 <= coords.distance <= 385001.0 + 20905.0


def test_moon_mean_anomaly_at_j2000():
    assert lunar_mean_anomaly(0.0) == pytest.approx(math.radians(134.963))


def test_reference_illumination():
    illumination = get_moon_illumination(MARCH_5_2013)
    assert illumination.fraction == pytest.approx(0.4848068202456373, abs=1e-9)
    assert illumination.phase == pytest.approx(0.7548368838538762, abs=1e-9)
    assert illumination.angle == pytest.approx(1.6732942678578346, abs=1e-9)


def test_full_moon():
    illumination = get_moon_illumination(FULL_MOON_2013_04_25)
    assert illumination.phase == pytest.approx(0.5, abs=0.02)
    assert illumination.fraction == pytest.approx(1.0, abs=0.02)


def test_new_moon():
    illumination = get_moon_illumination(NEW_MOON_2013_05_10)
    assert illumination.fraction == pytest.approx(0.0, abs=0.02)


def test_waxing_moon_has_negative_angle():
    # Five days after new moon.
    illumination = get_moon_illumination(NEW_MOON_2013_05_10 + 5 * 24 * HOUR_MS)
    assert illumination.angle < 0.0
    assert 0.0 < illumination.phase < 0.5


def test_illumination_ranges_over_a_lunation():
    for step in range(0, 60):
        illumination = get_moon_illumination(MARCH_5_2013 + step * 12 * HOUR_MS)
        assert 0.0 <= illumination.fraction <= 1.0
        assert 0.0 <= illumination.phase <= 1.0


def test_illumination_is_idempotent():
    assert get_moon_illumination(MARCH_5_2013) == get_moon_illumination(MARCH_5_2013)


def test_degenerate_moon_values_become_zero():
    coords = moon_coords(math.nan)
    assert coords.distance == 0.0
    assert math.isnan(coords.declination)

    position = get_moon_position(MARCH_5_2013, math.nan, LON)
    assert position.parallactic_angle == 0.0
    assert position.distance == pytest.approx(364121.37256256194, rel=1e-9)
    assert math.isnan(position.altitude)

    illumination = get_moon_illumination(math.nan)
    assert illumination.fraction == 0.0
    assert illumination.angle == 0.0
