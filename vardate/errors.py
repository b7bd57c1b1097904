"""Vardate exception hierarchy.

All vardate-specific exceptions inherit from VardateError.
"""

from __future__ import annotations


class VardateError(Exception):
    """Base exception for all vardate errors."""

    pass


class ValidationError(VardateError):
    """Invalid input values.

    Raised when a temporal value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Widening a date past year 9999
    """

    pass


class ParseError(VardateError):
    """Failed to parse string representation.

    Raised when text cannot be decoded as a variable precision date.

    Examples:
        - Empty string
        - Unrecognised layout such as "2016/02/15"
        - Compact timestamp with an odd number of digits
    """

    pass


class TimezoneError(VardateError):
    """Invalid UTC offset.

    Examples:
        - Offset string like "+5:3"
        - Offset outside -14h to +14h
    """

    pass


__all__ = [
    "VardateError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
]
