"""Obliquity coefficients of the nutation series.

Each term holds four coefficients in microarcseconds: the cosine
amplitude, the sine amplitude, and the rates of change of each per
Julian century. Terms are indexed in the same order as the argument
multipliers of :mod:`skyplace.nutation_arguments`.
"""

from __future__ import annotations

import math

Coefficients = tuple[float, float, float, float]

_TABLE: tuple[Coefficients, ...] = (
    (9205365.8, -1506.2, 885.7, -0.2),
    (573095.9, -570.2, -305.0, -0.3),
    (97845.5, 147.8, -48.8, -0.2),
    (-89753.6, 28.0, 46.9, 0.0),
    (7406.7, -327.1, -18.2, 0.8),
    (22442.3, -22.3, -67.6, 0.0),
    (-683.6, 46.8, 0.0, 0.0),
    (20070.7, 36.0, 1.6, 0.0),
    (12893.8, 39.5, -6.2, 0.0),
    (-9593.2, 14.4, 30.2, -0.1),
    (-6899.5, 4.8, -0.6, 0.0),
    (-5332.5, -0.1, 2.7, 0.0),
    (-125.2, 10.5, 0.0, 0.0),
    (-3323.4, -0.9, -0.3, 0.0),
    (3142.3, 8.9, 0.3, 0.0),
    (2552.5, 7.3, -1.2, 0.0),
    (2634.4, 8.8, 0.2, 0.0),
    (-2424.4, 1.6, -0.4, 0.0),
    (-123.3, 3.9, 0.0, 0.0),
    (1642.4, 7.3, -0.8, 0.0),
    (47.9, 3.2, 0.0, 0.0),
    (1321.2, 6.2, -0.6, 0.0),
    (-1234.1, -0.3, 0.6, 0.0),
    (-1076.5, -0.3, 0.0, 0.0),
    (-61.6, 1.8, 0.0, 0.0),
    (-55.4, 1.6, 0.0, 0.0),
    (856.9, -4.9, -2.1, 0.0),
    (-800.7, -0.1, 0.0, 0.0),
    (685.1, -0.6, -3.8, 0.0),
    (-16.9, -1.5, 0.0, 0.0),
    (695.7, 1.8, 0.0, 0.0),
    (642.2, -2.6, -1.6, 0.0),
    (13.3, 1.1, -0.1, 0.0),
    (521.9, 1.6, 0.0, 0.0),
    (325.8, 2.0, -0.1, 0.0),
    (-325.1, -0.5, 0.9, 0.0),
    (10.1, 0.3, 0.0, 0.0),
    (334.5, 1.6, 0.0, 0.0),
    (307.1, 0.4, -0.9, 0.0),
    (327.2, 0.5, 0.0, 0.0),
    (-304.6, -0.1, 0.0, 0.0),
    (304.0, 0.6, 0.0, 0.0),
    (-276.8, -0.5, 0.1, 0.0),
    (268.9, 1.3, 0.0, 0.0),
    (271.8, 1.1, 0.0, 0.0),
    (271.5, -0.4, -0.8, 0.0),
    (-5.2, 0.5, 0.0, 0.0),
    (-220.5, 0.1, 0.0, 0.0),
    (-20.1, 0.3, 0.0, 0.0),
    (-191.0, 0.1, 0.5, 0.0),
    (-4.1, 0.3, 0.0, 0.0),
    (130.6, -0.1, 0.0, 0.0),
    (3.0, 0.3, 0.0, 0.0),
    (122.9, 0.8, 0.0, 0.0),
    (3.7, -0.3, 0.0, 0.0),
    (123.1, 0.4, -0.3, 0.0),
    (-52.7, 15.3, 0.0, 0.0),
    (120.7, 0.3, -0.3, 0.0),
    (4.0, -0.3, 0.0, 0.0),
    (126.5, 0.5, 0.0, 0.0),
    (112.7, 0.5, -0.3, 0.0),
    (-106.1, -0.3, 0.3, 0.0),
    (-112.9, -0.2, 0.0, 0.0),
    (3.6, -0.2, 0.0, 0.0),
    (107.4, 0.3, 0.0, 0.0),
    (-10.9, 0.2, 0.0, 0.0),
    (-0.9, 0.0, 0.0, 0.0),
    (85.4, 0.0, 0.0, 0.0),
    (0.0, -88.8, 0.0, 0.0),
    (-71.0, -0.2, 0.0, 0.0),
    (-70.3, 0.0, 0.0, 0.0),
    (64.5, 0.4, 0.0, 0.0),
    (69.8, 0.0, 0.0, 0.0),
    (66.1, 0.4, 0.0, 0.0),
    (-61.0, -0.2, 0.0, 0.0),
    (-59.5, -0.1, 0.0, 0.0),
    (-55.6, 0.0, 0.2, 0.0),
    (51.7, 0.2, 0.0, 0.0),
    (-49.0, -0.1, 0.0, 0.0),
    (-52.7, -0.1, 0.0, 0.0),
    (-49.6, 1.4, 0.0, 0.0),
    (46.3, 0.4, 0.0, 0.0),
    (49.6, 0.1, 0.0, 0.0),
    (-5.1, 0.1, 0.0, 0.0),
    (-44.0, -0.1, 0.0, 0.0),
    (-39.9, -0.1, 0.0, 0.0),
    (-39.5, -0.1, 0.0, 0.0),
    (-3.9, 0.1, 0.0, 0.0),
    (-42.1, -0.1, 0.0, 0.0),
    (-17.2, 0.1, 0.0, 0.0),
    (-2.3, 0.1, 0.0, 0.0),
    (-39.2, 0.0, 0.0, 0.0),
    (-38.4, 0.1, 0.0, 0.0),
    (36.8, 0.2, 0.0, 0.0),
    (34.6, 0.1, 0.0, 0.0),
    (-32.7, 0.3, 0.0, 0.0),
    (30.4, 0.0, 0.0, 0.0),
    (0.4, 0.1, 0.0, 0.0),
    (29.3, 0.2, 0.0, 0.0),
    (31.6, 0.1, 0.0, 0.0),
    (0.8, -0.1, 0.0, 0.0),
    (-27.9, 0.0, 0.0, 0.0),
    (2.9, 0.0, 0.0, 0.0),
    (-25.3, 0.0, 0.0, 0.0),
    (25.0, 0.1, 0.0, 0.0),
    (27.5, 0.1, 0.0, 0.0),
    (-24.4, -0.1, 0.0, 0.0),
    (24.9, 0.2, 0.0, 0.0),
    (-22.8, -0.1, 0.0, 0.0),
    (0.9, -0.1, 0.0, 0.0),
    (24.4, 0.1, 0.0, 0.0),
    (23.9, 0.1, 0.0, 0.0),
    (22.5, 0.1, 0.0, 0.0),
    (20.8, 0.1, 0.0, 0.0),
    (20.1, 0.0, 0.0, 0.0),
    (21.5, 0.1, 0.0, 0.0),
    (-20.0, 0.0, 0.0, 0.0),
    (1.4, 0.0, 0.0, 0.0),
    (-0.2, -0.1, 0.0, 0.0),
    (19.0, 0.0, -0.1, 0.0),
    (20.5, 0.0, 0.0, 0.0),
    (-2.0, 0.0, 0.0, 0.0),
    (-17.6, -0.1, 0.0, 0.0),
    (19.0, 0.0, 0.0, 0.0),
    (-2.4, 0.0, 0.0, 0.0),
    (-18.4, -0.1, 0.0, 0.0),
    (17.1, 0.0, 0.0, 0.0),
    (0.4, 0.0, 0.0, 0.0),
    (18.4, 0.1, 0.0, 0.0),
    (0.0, 17.4, 0.0, 0.0),
    (-0.6, 0.0, 0.0, 0.0),
    (-15.4, 0.0, 0.0, 0.0),
    (-16.8, -0.1, 0.0, 0.0),
    (16.3, 0.0, 0.0, 0.0),
    (-2.0, 0.0, 0.0, 0.0),
    (-1.5, 0.0, 0.0, 0.0),
    (-14.3, -0.1, 0.0, 0.0),
    (14.4, 0.0, 0.0, 0.0),
    (-13.4, 0.0, 0.0, 0.0),
    (-14.3, -0.1, 0.0, 0.0),
    (-13.7, 0.0, 0.0, 0.0),
    (13.1, 0.1, 0.0, 0.0),
    (-1.7, 0.0, 0.0, 0.0),
    (-12.8, 0.0, 0.0, 0.0),
    (0.0, -14.4, 0.0, 0.0),
    (12.4, 0.0, 0.0, 0.0),
    (-12.0, 0.0, 0.0, 0.0),
    (-0.8, 0.0, 0.0, 0.0),
    (10.9, 0.1, 0.0, 0.0),
    (-10.8, 0.0, 0.0, 0.0),
    (10.5, 0.0, 0.0, 0.0),
    (-10.4, 0.0, 0.0, 0.0),
    (-11.2, 0.0, 0.0, 0.0),
    (10.5, 0.1, 0.0, 0.0),
    (-1.4, 0.0, 0.0, 0.0),
    (0.0, 0.1, 0.0, 0.0),
    (0.7, 0.0, 0.0, 0.0),
    (-10.3, 0.0, 0.0, 0.0),
    (-10.0, 0.0, 0.0, 0.0),
    (9.6, 0.0, 0.0, 0.0),
    (9.4, 0.1, 0.0, 0.0),
    (0.6, 0.0, 0.0, 0.0),
    # Planetary terms.
    (-87.7, 4.4, -0.4, -6.3),
    (46.3, 22.4, 0.5, -2.4),
    (15.6, -3.4, 0.1, 0.4),
    (5.2, 5.8, 0.2, -0.1),
    (-30.1, 26.9, 0.7, 0.0),
    (23.2, -0.5, 0.0, 0.6),
    (1.0, 23.2, 3.4, 0.0),
    (-12.2, -4.3, 0.0, 0.0),
    (-2.1, -3.7, -0.2, 0.1),
    (-18.6, -3.8, -0.4, 1.8),
    (5.5, -18.7, -1.8, -0.5),
    (-5.5, -18.7, 1.8, -0.5),
    (18.4, -3.6, 0.3, 0.9),
    (-0.6, 1.3, 0.0, 0.0),
    (-5.6, -19.5, 1.9, 0.0),
    (5.5, -19.1, -1.9, 0.0),
    (-17.3, -0.8, 0.0, 0.9),
    (-3.2, -8.3, -0.8, 0.3),
    (-0.1, 0.0, 0.0, 0.0),
    (-5.4, 7.8, -0.3, 0.0),
    (-14.8, 1.4, 0.0, 0.3),
    (-3.8, 0.4, 0.0, -0.2),
    (12.6, 3.2, 0.5, -1.5),
    (0.1, 0.0, 0.0, 0.0),
    (-13.6, 2.4, -0.1, 0.0),
    (0.9, 1.2, 0.0, 0.0),
    (-11.9, -0.5, 0.0, 0.3),
    (0.4, 12.0, 0.3, -0.2),
    (8.3, 6.1, -0.1, 0.1),
    (0.0, 0.0, 0.0, 0.0),
    (0.4, -10.8, 0.3, 0.0),
    (9.6, 2.2, 0.3, -1.2),
)


def _check_index(index: int) -> None:
    if not 0 <= index < len(_TABLE):
        raise IndexError(f"term index {index} out of range 0-{len(_TABLE) - 1}")


def obliquity_coefficients(index: int) -> Coefficients:
    """The four obliquity coefficients (microarcsec) of term ``index``."""
    _check_index(index)
    return _TABLE[index]


def obliquity_term(index: int, t: float, theta: float) -> float:
    """Contribution (microarcsec) of term ``index`` to nutation in obliquity.

    ``t`` is Julian centuries from J2000 and ``theta`` the term's
    argument in radians.
    """
    _check_index(index)
    c0, s0, ct, st = _TABLE[index]
    return (c0 + ct * t) * math.cos(theta) + (s0 + st * t) * math.sin(theta)