"""Geocentric apparent to mean place using precomputed parameters."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .vectors import (
    Vector,
    cartesian_to_spherical,
    dot,
    normalize,
    normalize_angle_positive,
    spherical_to_cartesian,
    transpose_multiply,
)

Matrix = tuple[Vector, Vector, Vector]

_PARAMETER_COUNT = 21


@dataclass(frozen=True)
class MeanToApparentParameters:
    """Star-independent mean-to-apparent parameters."""

    time_interval: float
    earth_barycentric_position: Vector
    earth_heliocentric_direction: Vector
    gravitational_radius_factor: float
    earth_velocity: Vector
    velocity_root: float
    precession_nutation: Matrix

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "MeanToApparentParameters":
        """Build from the flat 21-element layout.

        Order: interval, Earth barycentric position (3), heliocentric
        direction (3), 2 * gravitational radius / distance, Earth velocity
        in units of c (3), sqrt(1 - v^2), precession-nutation matrix (9,
        row by row).
        """
        v = [float(x) for x in values]
        if len(v) != _PARAMETER_COUNT:
            raise ValueError(
                f"expected {_PARAMETER_COUNT} parameters, got {len(v)}"
            )

        def vec(start: int) -> Vector:
            return (v[start], v[start + 1], v[start + 2])

        return cls(
            time_interval=v[0],
            earth_barycentric_position=vec(1),
            earth_heliocentric_direction=vec(4),
            gravitational_radius_factor=v[7],
            earth_velocity=vec(8),
            velocity_root=v[11],
            precession_nutation=(vec(12), vec(15), vec(18)),
        )


def apparent_to_mean(
    ra: float, da: float, params: MeanToApparentParameters
) -> tuple[float, float]:
    """Convert geocentric apparent RA, Dec to mean RA, Dec (radians)."""
    gr2e = params.gravitational_radius_factor
    ab1 = params.velocity_root
    ehn = params.earth_heliocentric_direction
    abv = params.earth_velocity

    p2 = transpose_multiply(params.precession_nutation, spherical_to_cartesian(ra, da))

    # Aberration, solved iteratively.
    ab1p1 = ab1 + 1.0
    p1 = p2
    for _ in range(2):
        p1dv = dot(p1, abv)
        p1dvp1 = 1.0 + p1dv
        w = 1.0 + p1dv / ab1p1
        _, p1 = normalize([(p1dvp1 * a - w * b) / ab1 for a, b in zip(p2, abv)])

    # Light deflection, solved iteratively.
    p = p1
    for _ in range(5):
        pde = dot(p, ehn)
        pdep1 = 1.0 + pde
        w = pdep1 - gr2e * pde
        _, p = normalize([(pdep1 * a - gr2e * e) / w for a, e in zip(p1, ehn)])

    rm, dm = cartesian_to_spherical(p)
    return normalize_angle_positive(rm), dm