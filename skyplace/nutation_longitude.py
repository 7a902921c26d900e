"""Longitude coefficients of the nutation series.

Each term holds four coefficients in microarcseconds: the cosine
amplitude, the sine amplitude, and the rates of change of each per
Julian century. Terms are indexed in the same order as the argument
multipliers of :mod:`skyplace.nutation_arguments`.
"""

from __future__ import annotations

import math

Coefficients = tuple[float, float, float, float]

_TABLE: tuple[Coefficients, ...] = (
    (3341.5, 17206241.8, 3.1, 17409.5),
    (-1716.8, -1317185.3, 1.4, -156.8),
    (285.7, -227667.0, 0.3, -23.5),
    (-68.6, -207448.0, 0.0, -21.4),
    (950.3, 147607.9, -2.3, -355.0),
    (-66.7, -51689.1, 0.2, 122.6),
    (-108.6, 71117.6, 0.0, 7.0),
    (35.6, -38740.2, 0.1, -36.2),
    (85.4, -30127.6, 0.0, -3.1),
    (9.0, 21583.0, 0.1, -50.3),
    (22.1, 12822.8, 0.0, 13.3),
    (3.4, 12350.8, 0.0, 1.3),
    (-21.1, 15699.4, 0.0, 1.6),
    (4.2, 6313.8, 0.0, 6.2),
    (-22.8, 5796.9, 0.0, 6.1),
    (15.7, -5961.1, 0.0, -0.6),
    (13.1, -5159.1, 0.0, -4.6),
    (1.8, 4592.7, 0.0, 4.5),
    (-17.5, 6336.0, 0.0, 0.7),
    (16.3, -3851.1, 0.0, -0.4),
    (-2.8, 4771.7, 0.0, 0.5),
    (13.8, -3099.3, 0.0, -0.3),
    (0.2, 2860.3, 0.0, 0.3),
    (1.4, 2045.3, 0.0, 2.0),
    (-8.6, 2922.6, 0.0, 0.3),
    (-7.7, 2587.9, 0.0, 0.2),
    (8.8, -1408.1, 0.0, 3.7),
    (1.4, 1517.5, 0.0, 1.5),
    (-1.9, -1579.7, 0.0, 7.7),
    (1.3, -2178.6, 0.0, -0.2),
    (-4.8, 1286.8, 0.0, 1.3),
    (6.3, 1267.2, 0.0, -4.0),
    (-1.0, 1669.3, 0.0, -8.3),
    (2.4, -1020.0, 0.0, -0.9),
    (4.5, -766.9, 0.0, 0.0),
    (-1.1, 756.5, 0.0, -1.7),
    (-1.4, -1097.3, 0.0, -0.5),
    (2.6, -663.0, 0.0, -0.6),
    (0.8, -714.1, 0.0, 1.6),
    (0.4, -629.9, 0.0, -0.6),
    (0.3, 580.4, 0.0, 0.6),
    (-1.6, 577.3, 0.0, 0.5),
    (-0.9, 644.4, 0.0, 0.0),
    (2.2, -534.0, 0.0, -0.5),
    (-2.5, 493.3, 0.0, 0.5),
    (-0.1, -477.3, 0.0, -2.4),
    (-0.9, 735.0, 0.0, -1.7),
    (0.7, 406.2, 0.0, 0.4),
    (-2.8, 656.9, 0.0, 0.0),
    (0.6, 358.0, 0.0, 2.0),
    (-0.7, 472.5, 0.0, -1.1),
    (-0.1, -300.5, 0.0, 0.0),
    (-1.2, 435.1, 0.0, -1.0),
    (1.8, -289.4, 0.0, 0.0),
    (0.6, -422.6, 0.0, 0.0),
    (0.8, -287.6, 0.0, 0.6),
    (-38.6, -392.3, 0.0, 0.0),
    (0.7, -281.8, 0.0, 0.6),
    (0.6, -405.7, 0.0, 0.0),
    (-1.2, 229.0, 0.0, 0.2),
    (1.1, -264.3, 0.0, 0.5),
    (-0.7, 247.9, 0.0, -0.5),
    (-0.2, 218.0, 0.0, 0.2),
    (0.6, -339.0, 0.0, 0.8),
    (-0.7, 198.7, 0.0, 0.2),
    (-1.5, 334.0, 0.0, 0.0),
    (0.1, 334.0, 0.0, 0.0),
    (-0.1, -198.1, 0.0, 0.0),
    (-106.6, 0.0, 0.0, 0.0),
    (-0.5, 165.8, 0.0, 0.0),
    (0.0, 134.8, 0.0, 0.0),
    (0.9, -151.6, 0.0, 0.0),
    (0.0, -129.7, 0.0, 0.0),
    (0.8, -132.8, 0.0, -0.1),
    (0.5, -140.7, 0.0, 0.0),
    (-0.1, 138.4, 0.0, 0.0),
    (0.0, 129.0, 0.0, -0.3),
    (0.5, -121.2, 0.0, 0.0),
    (-0.3, 114.5, 0.0, 0.0),
    (-0.1, 101.8, 0.0, 0.0),
    (-3.6, -101.9, 0.0, 0.0),
    (0.8, -109.4, 0.0, 0.0),
    (0.2, -97.0, 0.0, 0.0),
    (-0.7, 157.3, 0.0, 0.0),
    (0.2, -83.3, 0.0, 0.0),
    (-0.3, 93.3, 0.0, 0.0),
    (-0.1, 92.1, 0.0, 0.0),
    (-0.5, 133.6, 0.0, 0.0),
    (-0.1, 81.5, 0.0, 0.0),
    (0.0, 123.9, 0.0, 0.0),
    (-0.3, 128.1, 0.0, 0.0),
    (0.1, 74.1, 0.0, -0.3),
    (-0.2, -70.3, 0.0, 0.0),
    (-0.4, 66.6, 0.0, 0.0),
    (0.1, -66.7, 0.0, 0.0),
    (-0.7, 69.3, 0.0, -0.3),
    (0.0, -70.4, 0.0, 0.0),
    (-0.1, 101.5, 0.0, 0.0),
    (0.5, -69.1, 0.0, 0.0),
    (-0.2, 58.5, 0.0, 0.2),
    (0.1, -94.9, 0.0, 0.2),
    (0.0, 52.9, 0.0, -0.2),
    (0.1, 86.7, 0.0, -0.2),
    (-0.1, -59.2, 0.0, 0.2),
    (0.3, -58.8, 0.0, 0.1),
    (-0.3, 49.0, 0.0, 0.0),
    (-0.2, 56.9, 0.0, -0.1),
    (0.3, -50.2, 0.0, 0.0),
    (-0.2, 53.4, 0.0, -0.1),
    (0.1, -76.5, 0.0, 0.0),
    (-0.2, 45.3, 0.0, 0.0),
    (0.1, -46.8, 0.0, 0.0),
    (0.2, -44.6, 0.0, 0.0),
    (0.2, -48.7, 0.0, 0.0),
    (0.1, -46.8, 0.0, 0.0),
    (0.1, -42.0, 0.0, 0.0),
    (0.0, 46.4, 0.0, -0.1),
    (0.2, -67.3, 0.0, 0.1),
    (0.0, -65.8, 0.0, 0.2),
    (-0.1, -43.9, 0.0, 0.3),
    (0.0, -38.9, 0.0, 0.0),
    (-0.3, 63.9, 0.0, 0.0),
    (-0.2, 41.2, 0.0, 0.0),
    (0.0, -36.1, 0.0, 0.2),
    (-0.3, 58.5, 0.0, 0.0),
    (-0.1, 36.1, 0.0, 0.0),
    (0.0, -39.7, 0.0, 0.0),
    (0.1, -57.7, 0.0, 0.0),
    (-0.2, 33.4, 0.0, 0.0),
    (36.4, 0.0, 0.0, 0.0),
    (-0.1, 55.7, 0.0, -0.1),
    (0.1, -35.4, 0.0, 0.0),
    (0.1, -31.0, 0.0, 0.0),
    (-0.1, 30.1, 0.0, 0.0),
    (-0.3, 49.2, 0.0, 0.0),
    (-0.2, 49.1, 0.0, 0.0),
    (-0.1, 33.6, 0.0, 0.0),
    (0.1, -33.5, 0.0, 0.0),
    (0.1, -31.0, 0.0, 0.0),
    (-0.1, 28.0, 0.0, 0.0),
    (0.1, -25.2, 0.0, 0.0),
    (0.1, -26.2, 0.0, 0.0),
    (-0.2, 41.5, 0.0, 0.0),
    (0.0, 24.5, 0.0, 0.1),
    (-16.2, 0.0, 0.0, 0.0),
    (0.0, -22.3, 0.0, 0.0),
    (0.0, 23.1, 0.0, 0.0),
    (-0.1, 37.5, 0.0, 0.0),
    (0.2, -25.7, 0.0, 0.0),
    (0.0, 25.2, 0.0, 0.0),
    (0.1, -24.5, 0.0, 0.0),
    (-0.1, 24.3, 0.0, 0.0),
    (0.1, -20.7, 0.0, 0.0),
    (0.1, -20.8, 0.0, 0.0),
    (-0.2, 33.4, 0.0, 0.0),
    (32.9, 0.0, 0.0, 0.0),
    (0.1, -32.6, 0.0, 0.0),
    (0.0, 19.9, 0.0, 0.0),
    (-0.1, 19.6, 0.0, 0.0),
    (0.0, -18.7, 0.0, 0.0),
    (0.1, -19.0, 0.0, 0.0),
    (0.1, -28.6, 0.0, 0.0),
    # Planetary terms.
    (4.0, 178.8, -11.8, 0.3),
    (39.8, -107.3, -5.6, -1.0),
    (9.9, 164.0, -4.1, 0.1),
    (-4.8, -135.3, -3.4, -0.1),
    (50.5, 75.0, 1.4, -1.2),
    (-1.1, -53.5, 1.3, 0.0),
    (-45.0, -2.4, -0.4, 6.6),
    (-11.5, -61.0, -0.9, 0.4),
    (4.4, -68.4, -3.4, 0.0),
    (7.7, -47.1, -4.7, -1.0),
    (-42.9, -12.6, -1.2, 4.2),
    (-42.8, 12.7, -1.2, -4.2),
    (-7.6, -44.1, 2.1, -0.5),
    (-64.1, 1.7, 0.2, 4.5),
    (36.4, -10.4, 1.0, 3.5),
    (35.6, 10.2, 1.0, -3.5),
    (-1.7, 39.5, 2.0, 0.0),
    (50.9, -8.2, -0.8, -5.0),
    (0.0, 52.3, 1.2, 0.0),
    (-42.9, -17.8, 0.4, 0.0),
    (2.6, 34.3, 0.8, 0.0),
    (-0.8, -48.6, 2.4, -0.1),
    (-4.9, 30.5, 3.7, 0.7),
    (0.0, -43.6, 2.1, 0.0),
    (0.0, -25.4, 1.2, 0.0),
    (2.0, 40.9, -2.0, 0.0),
    (-2.1, 26.1, 0.6, 0.0),
    (22.6, -3.2, -0.5, -0.5),
    (-7.6, 24.9, -0.4, -0.2),
    (-6.2, 34.9, 1.7, 0.3),
    (2.0, 17.4, -0.4, 0.1),
    (-3.9, 20.5, 2.4, 0.6),
)


def _check_index(index: int) -> None:
    if not 0 <= index < len(_TABLE):
        raise IndexError(f"term index {index} out of range 0-{len(_TABLE) - 1}")


def longitude_coefficients(index: int) -> Coefficients:
    """The four longitude coefficients (microarcsec) of term ``index``."""
    _check_index(index)
    return _TABLE[index]


def longitude_term(index: int, t: float, theta: float) -> float:
    """Contribution (microarcsec) of term ``index`` to nutation in longitude.

    ``t`` is Julian centuries from J2000 and ``theta`` the term's
    argument in radians.
    """
    _check_index(index)
    c0, s0, ct, st = _TABLE[index]
    return (c0 + ct * t) * math.cos(theta) + (s0 + st * t) * math.sin(theta)