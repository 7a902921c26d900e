"""Relative air mass at a given zenith distance."""

from __future__ import annotations

import math

_MAX_ZD = math.radians(87.0)


def airmass(zd: float) -> float:
    """Air mass, in units of the zenith thickness, at observed zenith distance.

    ``zd`` is the refracted zenith distance in radians; its sign is
    ignored. Uses Hardie's (1962) polynomial fit to Bemporad's data.
    Beyond 87 degrees the result is held constant.
    """
    z = min(abs(zd), _MAX_ZD)
    seczm1 = 1.0 / math.cos(z) - 1.0
    return 1.0 + seczm1 * (0.9981833 - seczm1 * (0.002875 + 0.0008083 * seczm1))