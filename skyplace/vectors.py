"""Small 3-vector and angle helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = tuple[float, float, float]

_TWO_PI = 2.0 * math.pi


def spherical_to_cartesian(theta: float, phi: float) -> Vector:
    """Unit vector for longitude ``theta`` and latitude ``phi``."""
    cp = math.cos(phi)
    return (math.cos(theta) * cp, math.sin(theta) * cp, math.sin(phi))


def cartesian_to_spherical(v: Sequence[float]) -> tuple[float, float]:
    """Longitude and latitude of a vector; zero where undefined."""
    x, y, z = v
    d2 = x * x + y * y
    theta = 0.0 if d2 == 0.0 else math.atan2(y, x)
    phi = 0.0 if z == 0.0 and d2 == 0.0 else math.atan2(z, math.sqrt(d2))
    return theta, phi


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Scalar product of two 3-vectors."""
    return sum(x * y for x, y in zip(a, b))


def normalize(v: Sequence[float]) -> tuple[float, Vector]:
    """Modulus and unit vector; a null vector gives a null unit vector."""
    w = math.sqrt(dot(v, v))
    if w == 0.0:
        return 0.0, (0.0, 0.0, 0.0)
    x, y, z = (c / w for c in v)
    return w, (x, y, z)


def transpose_multiply(
    matrix: Sequence[Sequence[float]], v: Sequence[float]
) -> Vector:
    """Multiply ``v`` by the transpose of a 3x3 matrix."""
    x, y, z = (dot(column, v) for column in zip(*matrix))
    return (x, y, z)


def normalize_angle_positive(angle: float) -> float:
    """Bring an angle into the range 0 <= a < 2pi."""
    w = math.fmod(angle, _TWO_PI)
    if w < 0.0:
        w += _TWO_PI
    return w