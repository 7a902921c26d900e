"""Mean and local apparent sidereal time."""

from __future__ import annotations

import math

from .vectors import normalize_angle_positive

_TWO_PI = 2.0 * math.pi
# Seconds of time to radians.
_DS2R = math.pi / 43200.0
_MJD_J2000 = 51544.5
_DAYS_PER_CENTURY = 36525.0


def gmst(ut1: float) -> float:
    """Greenwich mean sidereal time (radians, 0-2pi) for a UT1 MJD."""
    tu = (ut1 - _MJD_J2000) / _DAYS_PER_CENTURY
    seconds = 24110.54841 + (8640184.812866 + (0.093104 - 6.2e-6 * tu) * tu) * tu
    return normalize_angle_positive(math.fmod(ut1, 1.0) * _TWO_PI + seconds * _DS2R)


def local_apparent_sidereal_time(date: float, offset: float) -> float:
    """Local apparent sidereal time (radians) for a UTC MJD.

    ``offset`` is longitude plus equation of the equinoxes plus the
    sidereal equivalent of UT1-UTC, in radians. The sum is not reduced
    to a standard range.
    """
    return gmst(date) + offset