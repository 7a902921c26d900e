import math

import pytest

from skyplace.mount import altaz

PHI = 0.35
DEC = 0.1


def test_meridian_transit_south_of_zenith():
    m = altaz(0.0, DEC, PHI)
    assert m.az == pytest.approx(math.pi)
    assert m.el == pytest.approx(math.pi / 2 - (PHI - DEC))
    assert m.pa == pytest.approx(0.0)


def test_zenith_defaults():
    m = altaz(0.0, PHI, PHI)
    assert m.az == 0.0
    assert m.el == pytest.approx(math.pi / 2)
    assert m.pa == pytest.approx(math.pi)


@pytest.mark.parametrize("ha", [-2.0, -0.5, 0.3, 1.7, 3.0])
def test_azimuth_range(ha):
    m = altaz(ha, DEC, PHI)
    assert 0.0 <= m.az < 2.0 * math.pi
    assert -math.pi <= m.el <= math.pi
    assert -math.pi <= m.pa <= math.pi


def test_mirror_symmetry_about_meridian():
    east = altaz(-0.7, DEC, PHI)
    west = altaz(0.7, DEC, PHI)
    assert west.az == pytest.approx(2.0 * math.pi - east.az)
    assert west.el == pytest.approx(east.el)
    assert west.pa == pytest.approx(-east.pa)
    assert west.pa > 0.0


@pytest.mark.parametrize("ha", [-1.2, 0.4, 2.1])
def test_velocities_match_numerical_derivatives(ha):
    h = 1e-6
    m = altaz(ha, DEC, PHI)
    plus = altaz(ha + h, DEC, PHI)
    minus = altaz(ha - h, DEC, PHI)
    assert m.azd == pytest.approx((plus.az - minus.az) / (2 * h), rel=1e-5)
    assert m.eld == pytest.approx((plus.el - minus.el) / (2 * h), rel=1e-5)
    assert m.pad == pytest.approx((plus.pa - minus.pa) / (2 * h), rel=1e-5)


@pytest.mark.parametrize("ha", [-1.2, 0.4, 2.1])
def test_accelerations_match_numerical_derivatives(ha):
    h = 1e-5
    m = altaz(ha, DEC, PHI)
    plus = altaz(ha + h, DEC, PHI)
    minus = altaz(ha - h, DEC, PHI)
    assert m.azdd == pytest.approx((plus.azd - minus.azd) / (2 * h), rel=1e-4, abs=1e-8)
    assert m.eldd == pytest.approx((plus.eld - minus.eld) / (2 * h), rel=1e-4, abs=1e-8)
    assert m.padd == pytest.approx((plus.pad - minus.pad) / (2 * h), rel=1e-4, abs=1e-8)