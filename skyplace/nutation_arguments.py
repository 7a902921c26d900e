"""Argument multipliers of the nutation series.

Each term's argument is an integer combination of nine fundamental
arguments, in this order: mean anomaly of the Moon, mean anomaly of the
Sun, mean argument of latitude of the Moon, mean elongation of the Moon
from the Sun, mean longitude of the Moon's ascending node, and the mean
longitudes of Venus, Mars, Jupiter and Saturn.
"""

from __future__ import annotations

from collections.abc import Sequence

Multipliers = tuple[int, int, int, int, int, int, int, int, int]

_FUNDAMENTAL_COUNT = 9

# Luni-solar terms: multipliers of the five Delaunay-style arguments.
_LUNI_SOLAR = (
    (0, 0, 0, 0, -1), (0, 0, 2, -2, 2), (0, 0, 2, 0, 2), (0, 0, 0, 0, -2),
    (0, 1, 0, 0, 0), (0, 1, 2, -2, 2), (1, 0, 0, 0, 0), (0, 0, 2, 0, 1),
    (1, 0, 2, 0, 2), (0, -1, 2, -2, 2), (0, 0, 2, -2, 1), (-1, 0, 2, 0, 2),
    (-1, 0, 0, 2, 0), (1, 0, 0, 0, 1), (1, 0, 0, 0, -1), (-1, 0, 2, 2, 2),
    (1, 0, 2, 0, 1), (-2, 0, 2, 0, 1), (0, 0, 0, 2, 0), (0, 0, 2, 2, 2),
    (2, 0, 0, -2, 0), (2, 0, 2, 0, 2), (1, 0, 2, -2, 2), (-1, 0, 2, 0, 1),
    (2, 0, 0, 0, 0), (0, 0, 2, 0, 0), (0, 1, 0, 0, 1), (-1, 0, 0, 2, 1),
    (0, 2, 2, -2, 2), (0, 0, 2, -2, 0), (-1, 0, 0, 2, -1), (0, 1, 0, 0, -1),
    (0, 2, 0, 0, 0), (-1, 0, 2, 2, 1), (1, 0, 2, 2, 2), (0, 1, 2, 0, 2),
    (-2, 0, 2, 0, 0), (0, 0, 2, 2, 1), (0, -1, 2, 0, 2), (0, 0, 0, 2, 1),
    (1, 0, 2, -2, 1), (2, 0, 0, -2, -1), (2, 0, 2, -2, 2), (2, 0, 2, 0, 1),
    (0, 0, 0, 2, -1), (0, -1, 2, -2, 1), (-1, -1, 0, 2, 0), (2, 0, 0, -2, 1),
    (1, 0, 0, 2, 0), (0, 1, 2, -2, 1), (1, -1, 0, 0, 0), (-2, 0, 2, 0, 2),
    (0, -1, 0, 2, 0), (3, 0, 2, 0, 2), (0, 0, 0, 1, 0), (1, -1, 2, 0, 2),
    (1, 0, 0, -1, 0), (-1, -1, 2, 2, 2), (-1, 0, 2, 0, 0), (2, 0, 0, 0, -1),
    (0, -1, 2, 2, 2), (1, 1, 2, 0, 2), (2, 0, 0, 0, 1), (1, 1, 0, 0, 0),
    (1, 0, -2, 2, -1), (1, 0, 2, 0, 0), (-1, 1, 0, 1, 0), (1, 0, 0, 0, 2),
    (-1, 0, 1, 0, 1), (0, 0, 2, 1, 2), (-1, 1, 0, 1, 1), (-1, 0, 2, 4, 2),
    (0, -2, 2, -2, 1), (1, 0, 2, 2, 1), (1, 0, 0, 0, -2), (-2, 0, 2, 2, 2),
    (1, 1, 2, -2, 2), (-2, 0, 2, 4, 2), (-1, 0, 4, 0, 2), (2, 0, 2, -2, 1),
    (1, 0, 0, -1, -1), (2, 0, 2, 2, 2), (1, 0, 0, 2, 1), (3, 0, 0, 0, 0),
    (0, 0, 2, -2, -1), (3, 0, 2, -2, 2), (0, 0, 4, -2, 2), (-1, 0, 0, 4, 0),
    (0, 1, 2, 0, 1), (0, 0, 2, -2, 3), (-2, 0, 0, 4, 0), (-1, -1, 0, 2, 1),
    (-2, 0, 2, 0, -1), (0, 0, 2, 0, -1), (0, -1, 2, 0, 1), (0, 1, 0, 0, 2),
    (0, 0, 2, -1, 2), (2, 1, 0, -2, 0), (0, 0, 2, 4, 2), (-1, -1, 0, 2, -1),
    (-1, 1, 0, 2, 0), (1, -1, 0, 0, 1), (0, -1, 2, -2, 0), (0, 1, 0, 0, -2),
    (1, -1, 2, 2, 2), (1, 0, 0, 2, -1), (-1, 1, 2, 2, 2), (3, 0, 2, 0, 1),
    (0, 1, 2, 2, 2), (1, 0, 2, -2, 0), (-1, 0, -2, 4, -1), (-1, -1, 2, 2, 1),
    (0, -1, 2, 2, 1), (2, -1, 2, 0, 2), (0, 0, 0, 2, 2), (1, -1, 2, 0, 1),
    (-1, 1, 2, 0, 2), (0, 1, 0, 2, 0), (0, 1, 2, -2, 0), (0, 3, 2, -2, 2),
    (0, 0, 0, 1, 1), (-1, 0, 2, 2, 0), (2, 1, 2, 0, 2), (1, 1, 0, 0, 1),
    (2, 0, 0, 2, 0), (1, 1, 2, 0, 1), (-1, 0, 0, 2, 2), (1, 0, -2, 2, 0),
    (0, -1, 0, 2, -1), (-1, 0, 1, 0, 2), (0, 1, 0, 1, 0), (1, 0, -2, 2, -2),
    (0, 0, 0, 1, -1), (1, -1, 0, 0, -1), (0, 0, 0, 4, 0), (1, -1, 0, 2, 0),
    (1, 0, 2, 1, 2), (1, 0, 2, -1, 2), (-1, 0, 0, 2, -2), (0, 0, 2, 1, 1),
    (-1, 0, 2, 0, -1), (-1, 0, 2, 4, 1), (0, 0, 2, 2, 0), (1, 1, 2, -2, 1),
    (0, 0, 1, 0, 1), (-1, 0, 2, -1, 1), (-2, 0, 2, 2, 1), (2, -1, 0, 0, 0),
    (4, 0, 2, 0, 2), (2, 1, 2, -2, 2), (0, 1, 2, 1, 2), (1, 0, 4, -2, 2),
    (1, 1, 0, 0, -1), (-2, 0, 2, 4, 1), (2, 0, 2, 0, 0), (-1, 0, 1, 0, 0),
    (1, 0, 0, 1, 0), (0, 1, 0, 2, 1), (-1, 0, 4, 0, 1), (-1, 0, 0, 4, 1),
    (2, 0, 2, 2, 1), (2, 1, 0, 0, 0),
)

# Planetary terms: multipliers of all nine arguments.
_PLANETARY = (
    (0, 0, 5, -5, 5, -3, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 2, 0),
    (0, 0, 1, -1, 1, 0, 0, -1, 0),
    (0, 0, -1, 1, -1, 1, 0, 0, 0),
    (0, 0, -1, 1, 0, 0, 2, 0, 0),
    (0, 0, 3, -3, 3, 0, 0, -1, 0),
    (0, 0, -8, 8, -7, 5, 0, 0, 0),
    (0, 0, -1, 1, -1, 0, 2, 0, 0),
    (0, 0, -2, 2, -2, 2, 0, 0, 0),
    (0, 0, -6, 6, -6, 4, 0, 0, 0),
    (0, 0, -2, 2, -2, 0, 8, -3, 0),
    (0, 0, 6, -6, 6, 0, -8, 3, 0),
    (0, 0, 4, -4, 4, -2, 0, 0, 0),
    (0, 0, -3, 3, -3, 2, 0, 0, 0),
    (0, 0, 4, -4, 3, 0, -8, 3, 0),
    (0, 0, -4, 4, -5, 0, 8, -3, 0),
    (0, 0, 0, 0, 0, 2, 0, 0, 0),
    (0, 0, -4, 4, -4, 3, 0, 0, 0),
    (0, 1, -1, 1, -1, 0, 0, 1, 0),
    (0, 0, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 1, -1, 1, 1, 0, 0, 0),
    (0, 0, 2, -2, 2, 0, -2, 0, 0),
    (0, -1, -7, 7, -7, 5, 0, 0, 0),
    (-2, 0, 2, 0, 2, 0, 0, -2, 0),
    (-2, 0, 2, 0, 1, 0, 0, -3, 0),
    (0, 0, 2, -2, 2, 0, 0, -2, 0),
    (0, 0, 1, -1, 1, 0, 0, 1, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 2),
    (0, 0, 0, 0, 0, 0, 0, 0, 1),
    (2, 0, -2, 0, -2, 0, 0, 3, 0),
    (0, 0, 1, -1, 1, 0, 0, -2, 0),
    (0, 0, -7, 7, -7, 5, 0, 0, 0),
)

_TABLE: tuple[Multipliers, ...] = tuple(
    row + (0, 0, 0, 0) for row in _LUNI_SOLAR
) + _PLANETARY


def term_count() -> int:
    """Number of terms in the nutation series."""
    return len(_TABLE)


def _check_index(index: int) -> None:
    if not 0 <= index < len(_TABLE):
        raise IndexError(f"term index {index} out of range 0-{len(_TABLE) - 1}")


def multipliers(index: int) -> Multipliers:
    """The nine integer argument multipliers of term ``index``."""
    _check_index(index)
    return _TABLE[index]


def argument(index: int, fundamentals: Sequence[float]) -> float:
    """Argument (radians) of term ``index`` for the nine fundamental arguments."""
    _check_index(index)
    if len(fundamentals) != _FUNDAMENTAL_COUNT:
        raise ValueError(
            f"expected {_FUNDAMENTAL_COUNT} fundamental arguments, "
            f"got {len(fundamentals)}"
        )
    return sum(float(m) * a for m, a in zip(_TABLE[index], fundamentals))