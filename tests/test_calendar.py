import pytest

from skyplace.calendar import caldj, gregorian_to_mjd


def test_mjd_epoch_is_zero():
    assert gregorian_to_mjd(1858, 11, 17) == 0.0


def test_j2000_day_start():
    # J2000.0 is MJD 51544.5, i.e. noon on 2000-01-01.
    assert gregorian_to_mjd(2000, 1, 1) == 51544.5 - 0.5


@pytest.mark.parametrize(
    "short_year, full_year",
    [(0, 2000), (49, 2049), (50, 1950), (99, 1999), (100, 100), (-5, -5), (1999, 1999)],
)
def test_caldj_year_expansion(short_year, full_year):
    assert caldj(short_year, 3, 15) == gregorian_to_mjd(full_year, 3, 15)


@pytest.mark.parametrize(
    "year, leap",
    [(1900, False), (2000, True), (2004, True), (2100, False), (2023, False), (-4, True)],
)
def test_year_lengths(year, leap):
    length = gregorian_to_mjd(year + 1, 1, 1) - gregorian_to_mjd(year, 1, 1)
    assert length == (366 if leap else 365)


@pytest.mark.parametrize(
    "year, month, last_day",
    [(2021, 1, 31), (2021, 2, 28), (2024, 2, 29), (2021, 4, 30), (2021, 11, 30)],
)
def test_month_boundary_is_one_day(year, month, last_day):
    next_first = gregorian_to_mjd(year, month + 1, 1)
    assert next_first - gregorian_to_mjd(year, month, last_day) == 1.0


def test_year_boundary_is_one_day():
    assert gregorian_to_mjd(2022, 1, 1) - gregorian_to_mjd(2021, 12, 31) == 1.0


def test_days_are_consecutive_through_a_month():
    values = [gregorian_to_mjd(2010, 7, d) for d in range(1, 32)]
    assert all(b - a == 1.0 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("month", [0, 13, -1])
def test_bad_month(month):
    with pytest.raises(ValueError, match="month"):
        gregorian_to_mjd(2000, month, 1)


def test_bad_year():
    with pytest.raises(ValueError, match="year"):
        gregorian_to_mjd(-4800, 1, 1)


def test_earliest_year_accepted():
    assert gregorian_to_mjd(-4799, 1, 2) - gregorian_to_mjd(-4799, 1, 1) == 1.0


@pytest.mark.parametrize(
    "year, month, day",
    [(2000, 1, 0), (1900, 2, 29), (2021, 4, 31), (2021, 12, 32)],
)
def test_bad_day(year, month, day):
    with pytest.raises(ValueError, match="day"):
        gregorian_to_mjd(year, month, day)


def test_caldj_bad_day_after_expansion():
    with pytest.raises(ValueError, match="day"):
        caldj(50, 2, 29)


def test_caldj_leap_day_after_expansion():
    assert caldj(0, 3, 1) - caldj(0, 2, 29) == 1.0