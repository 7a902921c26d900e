import math

import pytest

from skyplace.nutation_arguments import term_count
from skyplace.nutation_longitude import longitude_coefficients, longitude_term


def test_table_matches_argument_table_length():
    n = term_count()
    assert len(longitude_coefficients(n - 1)) == 4
    with pytest.raises(IndexError):
        longitude_coefficients(n)


def test_first_term_coefficients():
    assert longitude_coefficients(0) == (3341.5, 17206241.8, 3.1, 17409.5)


def test_last_term_coefficients():
    assert longitude_coefficients(193) == (-3.9, 20.5, 2.4, 0.6)


def test_first_planetary_term_coefficients():
    assert longitude_coefficients(162) == (4.0, 178.8, -11.8, 0.3)


@pytest.mark.parametrize("index", [-1, 194, 1000])
def test_bad_index_raises(index):
    with pytest.raises(IndexError):
        longitude_coefficients(index)
    with pytest.raises(IndexError):
        longitude_term(index, 0.0, 0.0)


def test_term_at_zero_argument_is_cosine_amplitude():
    assert longitude_term(0, 0.0, 0.0) == pytest.approx(3341.5)


def test_term_at_quarter_turn_is_sine_amplitude():
    assert longitude_term(0, 0.0, math.pi / 2) == pytest.approx(17206241.8)


def test_term_includes_time_rates():
    c0, s0, ct, st = longitude_coefficients(1)
    assert longitude_term(1, 2.0, 0.0) == pytest.approx(c0 + 2.0 * ct)
    assert longitude_term(1, 2.0, math.pi / 2) == pytest.approx(s0 + 2.0 * st)


@pytest.mark.parametrize("index", [0, 5, 68, 170])
def test_term_periodic_in_argument(index):
    a = longitude_term(index, 0.3, 1.1)
    b = longitude_term(index, 0.3, 1.1 + 2.0 * math.pi)
    assert a == pytest.approx(b, rel=1e-9, abs=1e-6)


def test_pure_cosine_term_vanishes_at_quarter_turn():
    # Term 68 has only a cosine amplitude.
    assert longitude_term(68, 0.0, math.pi / 2) == pytest.approx(0.0, abs=1e-9)