"""Timezone representation using a fixed UTC offset.

This module provides the Timezone class. Offsets are fixed; there is no
IANA database and no daylight saving logic.
"""

from __future__ import annotations

import re
from typing import ClassVar

from vardate._internal.constants import DEFAULT_OFFSET_SECONDS, MAX_UTC_OFFSET_SECONDS
from vardate.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$")


class Timezone:
    """A timezone represented as a UTC offset in seconds.

    Positive offsets are east of UTC (ahead in time), negative offsets
    west of UTC.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(5, 30).offset_seconds
        19800

        >>> Timezone.from_string("-0500").offset_seconds
        -18000
    """

    __slots__ = ("_offset_seconds",)

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int) -> None:
        """Create a Timezone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds.

        Raises:
            TimezoneError: If offset_seconds is not an int or is outside
                +/-14 hours.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone singleton."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def default(cls) -> Timezone:
        """Return the timezone applied to text that carries no offset."""
        if DEFAULT_OFFSET_SECONDS == 0:
            return cls.utc()
        return cls(DEFAULT_OFFSET_SECONDS)

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from an hours and minutes offset.

        Args:
            hours: Hour component of offset. Its sign gives the direction.
            minutes: Minute component (0-59), always non-negative.

        Raises:
            TimezoneError: If minutes is out of range or the total offset
                exceeds 14 hours.

        Examples:
            >>> Timezone.from_hours(-5).offset_seconds
            -18000
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        if hours >= 0:
            offset_seconds = hours * 3600 + minutes * 60
        else:
            offset_seconds = hours * 3600 - minutes * 60

        return cls(offset_seconds)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse an offset string.

        Supported formats:
            - "Z", "z" or "UTC"
            - "+HH:MM" / "-HH:MM"
            - "+HHMM" / "-HHMM"
            - "+HH" / "-HH"

        Raises:
            TimezoneError: If the string cannot be parsed.

        Examples:
            >>> Timezone.from_string("Z").is_utc
            True

            >>> Timezone.from_string("+05:30").offset_seconds
            19800
        """
        s = s.strip()

        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0

        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * 3600 + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds."""
        return self._offset_seconds

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._offset_seconds == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return "UTC" or a string like "+05:30"."""
        if self._offset_seconds == 0:
            return "UTC"

        total_minutes = abs(self._offset_seconds) // 60
        hours, minutes = divmod(total_minutes, 60)
        sign = "+" if self._offset_seconds >= 0 else "-"
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Timezone"]
