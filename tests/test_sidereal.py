import math

import pytest

from skyplace.sidereal import gmst, local_apparent_sidereal_time


@pytest.mark.parametrize("date", [0.0, 40000.25, 51544.5, 55000.9, 60000.0, -1000.3])
def test_gmst_in_range(date):
    value = gmst(date)
    assert 0.0 <= value < 2.0 * math.pi


def test_gmst_daily_advance():
    d = 55000.3
    advance = (gmst(d + 1.0) - gmst(d)) % (2.0 * math.pi)
    expected = 8640184.812866 / 36525.0 * math.pi / 43200.0
    assert advance == pytest.approx(expected, rel=1e-6)


def test_gmst_increases_within_short_interval():
    d = 55000.1
    assert gmst(d + 0.01) > gmst(d)


def test_last_with_zero_offset_is_gmst():
    assert local_apparent_sidereal_time(56000.2, 0.0) == gmst(56000.2)


def test_last_adds_offset_without_wrapping():
    d = 56000.2
    assert local_apparent_sidereal_time(d, 10.0) == pytest.approx(gmst(d) + 10.0)
    assert local_apparent_sidereal_time(d, -1.5) == pytest.approx(gmst(d) - 1.5)