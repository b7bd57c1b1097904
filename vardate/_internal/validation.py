"""Validation utilities for vardate.

This module provides checks ensuring temporal components are within
valid ranges. Each check raises ValidationError on failure.

This module is not part of the public API.
"""

from __future__ import annotations

from vardate._internal.calendar import days_in_month
from vardate._internal.constants import (
    MAX_RESULT_YEAR,
    MAX_YEAR,
    MIN_RESULT_YEAR,
    MIN_YEAR,
    NANOS_PER_SECOND,
)
from vardate.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_result_year(year: int) -> None:
    """Validate the year of an arithmetic result.

    Results may fall one year outside the constructor limits, so adding
    one unit to any valid value always succeeds.

    Raises:
        ValidationError: If year is outside MIN_RESULT_YEAR to MAX_RESULT_YEAR.
    """
    if year < MIN_RESULT_YEAR or year > MAX_RESULT_YEAR:
        raise ValidationError(
            f"result year must be between {MIN_RESULT_YEAR} and "
            f"{MAX_RESULT_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate time-of-day components.

    Leap seconds (second == 60) are not representable.

    Raises:
        ValidationError: If any component is out of range.
    """
    limits = (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("nanosecond", nanosecond, NANOS_PER_SECOND - 1),
    )
    for name, value, max_val in limits:
        if value < 0 or value > max_val:
            raise ValidationError(
                f"{name} must be between 0 and {max_val}, got {value}"
            )


__all__ = [
    "validate_year",
    "validate_result_year",
    "validate_month",
    "validate_day",
    "validate_time",
]
