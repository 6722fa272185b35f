"""Constants shared by the solar and lunar formulas."""

from __future__ import annotations

import math

MILLISECONDS_PER_DAY = 1000 * 60 * 60 * 24
J1970 = 2_440_588  # Julian day of the Unix epoch at noon.
J2000 = 2_451_545

PI = math.pi
TO_RAD = PI / 180.0

OBLIQUITY_OF_EARTH = 23.4397 * TO_RAD
PERIHELION_OF_EARTH = 102.9372 * TO_RAD

# Mean Earth-Sun distance in kilometers.
SUN_DISTANCE_KM = 149_598_000.0

# Fractional-day correction of the low-precision transit approximation.
J0 = 0.0009
