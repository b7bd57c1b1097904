"""Calendar utilities for vardate.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: leap year logic, month lengths, MJD
(Modified Julian Day) conversions and month arithmetic.

MJD 0 = 1858-11-17 00:00 UTC (November 17, 1858)

This module is not part of the public API.
"""

from __future__ import annotations

from vardate._internal.constants import DAYS_IN_MONTH

# Days in one 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2016)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Floor division keeps this valid for years <= 0
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Ordinals <= 0 are shifted forward by whole 400-year cycles, which
    repeat exactly in the Gregorian calendar, and shifted back afterwards.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    if ordinal <= 0:
        cycles = -ordinal // _DAYS_PER_400_YEARS + 1
        year, month, day = ordinal_to_ymd(ordinal + cycles * _DAYS_PER_400_YEARS)
        return (year - 400 * cycles, month, day)

    # Same cycle decomposition as the standard library's datetime
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert 1-indexed day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_MJD_EPOCH_ORDINAL = ymd_to_ordinal(1858, 11, 17)


def ymd_to_mjd(year: int, month: int, day: int) -> int:
    """Convert year, month, day to Modified Julian Day number."""
    return ymd_to_ordinal(year, month, day) - _MJD_EPOCH_ORDINAL


def mjd_to_ymd(mjd: int) -> tuple[int, int, int]:
    """Convert Modified Julian Day number to year, month, day."""
    return ordinal_to_ymd(mjd + _MJD_EPOCH_ORDINAL)


def add_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Shift a calendar date by whole months, clamping the day.

    If the day does not exist in the target month it becomes the last
    day of that month, so the result never spills into the month after.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.
        months: Number of months to add (can be negative).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> add_months(2016, 1, 31, 1)
        (2016, 2, 29)
        >>> add_months(2016, 12, 1, 1)
        (2017, 1, 1)
        >>> add_months(2015, 1, 31, 1)
        (2015, 2, 28)
    """
    total_months = year * 12 + (month - 1) + months
    new_year, new_month_index = divmod(total_months, 12)
    new_month = new_month_index + 1
    new_day = min(day, days_in_month(new_year, new_month))
    return (new_year, new_month, new_day)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_mjd",
    "mjd_to_ymd",
    "add_months",
]
