import math

import pytest

from skyplace.vectors import (
    cartesian_to_spherical,
    dot,
    normalize,
    normalize_angle_positive,
    spherical_to_cartesian,
    transpose_multiply,
)


@pytest.mark.parametrize("theta,phi", [(0.3, 0.2), (2.5, -1.1), (-1.0, 0.7)])
def test_spherical_round_trip(theta, phi):
    v = spherical_to_cartesian(theta, phi)
    assert dot(v, v) == pytest.approx(1.0)
    t, p = cartesian_to_spherical(v)
    assert math.cos(t) == pytest.approx(math.cos(theta))
    assert math.sin(t) == pytest.approx(math.sin(theta))
    assert p == pytest.approx(phi)


def test_cartesian_to_spherical_null_vector():
    assert cartesian_to_spherical((0.0, 0.0, 0.0)) == (0.0, 0.0)


def test_cartesian_to_spherical_pole():
    theta, phi = cartesian_to_spherical((0.0, 0.0, 2.0))
    assert theta == 0.0
    assert phi == pytest.approx(math.pi / 2)


def test_dot():
    assert dot((1.0, 2.0, 3.0), (4.0, -5.0, 6.0)) == 12.0


def test_normalize():
    w, u = normalize((3.0, 0.0, 4.0))
    assert w == pytest.approx(5.0)
    assert u == pytest.approx((0.6, 0.0, 0.8))


def test_normalize_null_vector():
    assert normalize((0.0, 0.0, 0.0)) == (0.0, (0.0, 0.0, 0.0))


def test_transpose_multiply_selects_row():
    m = ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    assert transpose_multiply(m, (1.0, 0.0, 0.0)) == (1.0, 2.0, 3.0)
    assert transpose_multiply(m, (0.0, 0.0, 1.0)) == (7.0, 8.0, 9.0)


def test_transpose_multiply_inverts_rotation():
    a = 0.4
    rot = (
        (math.cos(a), -math.sin(a), 0.0),
        (math.sin(a), math.cos(a), 0.0),
        (0.0, 0.0, 1.0),
    )
    v = (0.2, -0.5, 0.8)
    rotated = tuple(dot(row, v) for row in rot)
    assert transpose_multiply(rot, rotated) == pytest.approx(v)


@pytest.mark.parametrize("angle", [-7.0, -0.1, 0.0, 1.0, 6.5, 20.0])
def test_normalize_angle_positive(angle):
    w = normalize_angle_positive(angle)
    assert 0.0 <= w < 2.0 * math.pi
    assert math.cos(w) == pytest.approx(math.cos(angle))
    assert math.sin(w) == pytest.approx(math.sin(angle))


def test_normalize_angle_negative_quarter():
    assert normalize_angle_positive(-math.pi / 2) == pytest.approx(1.5 * math.pi)