"""Gregorian calendar dates to Modified Julian Dates."""

from __future__ import annotations

_EARLIEST_YEAR = -4799
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_to_mjd(iy: int, im: int, id: int) -> float:
    """Modified Julian Date (JD - 2400000.5) at 0h of a Gregorian date.

    Years are taken literally. Raises ``ValueError`` for a year before
    -4799, a month outside 1-12 or a day outside the month.
    """
    if iy < _EARLIEST_YEAR:
        raise ValueError(f"bad year {iy}: earliest supported is {_EARLIEST_YEAR}")
    if not 1 <= im <= 12:
        raise ValueError(f"bad month {im}: must be 1-12")

    days_in_month = _MONTH_LENGTHS[im - 1] + (1 if im == 2 and _is_leap(iy) else 0)
    if not 1 <= id <= days_in_month:
        raise ValueError(f"bad day {id}: month {im} of {iy} has {days_in_month} days")

    # January and February count as months 13 and 14 of the previous year.
    my = -1 if im < 3 else 0
    iypmy = iy + my
    mjd = (
        (1461 * (iypmy + 4800)) // 4
        + (367 * (im - 2 - 12 * my)) // 12
        - (3 * ((iypmy + 4900) // 100)) // 4
        + id
        - 2432076
    )
    return float(mjd)


def caldj(iy: int, im: int, id: int) -> float:
    """Modified Julian Date at 0h, with two-digit years expanded.

    Years 0-49 mean 2000-2049 and 50-99 mean 1950-1999; all other years,
    including negative ones, are taken literally. Errors are as for
    :func:`gregorian_to_mjd`.
    """
    if 0 <= iy <= 49:
        iy += 2000
    elif 50 <= iy <= 99:
        iy += 1900
    return gregorian_to_mjd(iy, im, id)