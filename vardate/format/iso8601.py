"""ISO 8601 parsing and formatting of variable precision dates.

This module converts between text and VariablePrecisionDateTime. The
granularity of the result is taken from how much of the date was written.

Functions:
    parse_variable_precision: Decode text into a VariablePrecisionDateTime.
    format_at_granularity: Render a VariablePrecisionDateTime as text.

Supported layouts:

Extended:
    - YYYY                          (YEAR)
    - YYYY-MM                       (MONTH)
    - YYYY-MM-DD                    (DAY)
    - YYYY-MM-DDTHH                 (HOUR)
    - YYYY-MM-DDTHH:MM              (MINUTE)
    - YYYY-MM-DDTHH:MM:SS           (SECOND)
    - YYYY-MM-DDTHH:MM:SS.f         (NANOSECOND, 1-9 digits)

    A space may replace the T. Layouts with a time part may end in an
    offset: Z, +HH:MM, +HHMM or +HH. Years may be signed (-0044).

Compact (web archive timestamps, always UTC):
    - yyyy, yyyyMM, yyyyMMdd, yyyyMMddHH, yyyyMMddHHmm, yyyyMMddHHmmss
    - yyyyMMddHHmmss followed by 1-9 fraction digits (NANOSECOND)

Examples:
    >>> v = parse_variable_precision("2016-02-15T10:00")
    >>> v.granularity
    <Granularity.MINUTE: 'minute'>

    >>> format_at_granularity(parse_variable_precision("20161231"))
    '2016-12-31'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, assert_never

from vardate.errors import ParseError
from vardate.units.granularity import Granularity
from vardate.units.timezone import Timezone

if TYPE_CHECKING:
    from vardate.core.variable_precision import VariablePrecisionDateTime

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"^([+-]\d{4,}|\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$", re.ASCII)
_TIME_PATTERN = re.compile(
    r"^(\d{2})(?::(\d{2})(?::(\d{2})(?:[.,](\d{1,9}))?)?)?$", re.ASCII
)
_OFFSET_SUFFIX = re.compile(r"([Zz]|[+-]\d{2}(?::?\d{2})?)$", re.ASCII)
_DATE_TIME_SEPARATOR = re.compile(r"[Tt ]")
_COMPACT_PATTERN = re.compile(r"[0-9]+")

# Compact digit count -> granularity; longer strings carry a fraction
_COMPACT_LENGTHS: dict[int, Granularity] = {
    4: Granularity.YEAR,
    6: Granularity.MONTH,
    8: Granularity.DAY,
    10: Granularity.HOUR,
    12: Granularity.MINUTE,
    14: Granularity.SECOND,
}
_COMPACT_MAX_LENGTH = 14 + 9


def parse_variable_precision(s: str) -> VariablePrecisionDateTime:
    """Decode text into a VariablePrecisionDateTime.

    Fields that were not written are zero (or 1 for month and day), and
    the granularity records the last field that was written.

    Args:
        s: The text to decode.

    Returns:
        The decoded value.

    Raises:
        ParseError: If the text is empty or not a supported layout.
        ValidationError: If a component is out of range (e.g. "2016-13").
        TimezoneError: If the offset is out of range (e.g. "+15:00").

    Examples:
        >>> parse_variable_precision("2016").date
        DateTime(2016, 1, 1, 0, 0, 0, nanosecond=0, timezone=UTC)

        >>> parse_variable_precision("2016-02-15T10:30:00.5+01:00").granularity
        <Granularity.NANOSECOND: 'nanosecond'>
    """
    if not isinstance(s, str):
        raise ParseError(f"expected str, got {type(s).__name__}")

    text = s.strip()
    if not text:
        raise ParseError("empty date string")

    if _COMPACT_PATTERN.fullmatch(text) and len(text) != 4:
        result = _parse_compact(text)
    else:
        result = _parse_extended(text)

    logger.debug("decoded %r as %r", s, result)
    return result


def _parse_extended(text: str) -> VariablePrecisionDateTime:
    from vardate.core.datetime import DateTime
    from vardate.core.variable_precision import VariablePrecisionDateTime

    parts = _DATE_TIME_SEPARATOR.split(text, maxsplit=1)
    date_str = parts[0]
    time_str = parts[1] if len(parts) == 2 else None

    date_match = _DATE_PATTERN.match(date_str)
    if not date_match:
        raise ParseError(
            f"invalid date: {text!r}. Expected YYYY, YYYY-MM or YYYY-MM-DD"
        )
    year_str, month_str, day_str = date_match.groups()
    year = int(year_str)
    month = int(month_str) if month_str else 1
    day = int(day_str) if day_str else 1

    if time_str is None:
        if day_str:
            granularity = Granularity.DAY
        elif month_str:
            granularity = Granularity.MONTH
        else:
            granularity = Granularity.YEAR
        return VariablePrecisionDateTime(
            DateTime(year, month, day, timezone=Timezone.default()), granularity
        )

    if not day_str:
        raise ParseError(f"time given without a full date: {text!r}")

    timezone = Timezone.default()
    offset_match = _OFFSET_SUFFIX.search(time_str)
    if offset_match:
        timezone = Timezone.from_string(offset_match.group(1))
        time_str = time_str[: offset_match.start()]

    time_match = _TIME_PATTERN.match(time_str)
    if not time_match:
        raise ParseError(
            f"invalid time: {text!r}. Expected HH, HH:MM, HH:MM:SS or HH:MM:SS.f"
        )
    hour_str, minute_str, second_str, frac_str = time_match.groups()

    if frac_str:
        granularity = Granularity.NANOSECOND
    elif second_str:
        granularity = Granularity.SECOND
    elif minute_str:
        granularity = Granularity.MINUTE
    else:
        granularity = Granularity.HOUR

    date = DateTime(
        year,
        month,
        day,
        int(hour_str),
        int(minute_str) if minute_str else 0,
        int(second_str) if second_str else 0,
        nanosecond=_parse_fractional_seconds(frac_str) if frac_str else 0,
        timezone=timezone,
    )
    return VariablePrecisionDateTime(date, granularity)


def _parse_compact(text: str) -> VariablePrecisionDateTime:
    from vardate.core.datetime import DateTime
    from vardate.core.variable_precision import VariablePrecisionDateTime

    length = len(text)
    if length > _COMPACT_MAX_LENGTH:
        raise ParseError(f"compact timestamp too long: {text!r}")
    if length > 14:
        granularity = Granularity.NANOSECOND
    elif length in _COMPACT_LENGTHS:
        granularity = _COMPACT_LENGTHS[length]
    else:
        raise ParseError(
            f"invalid compact timestamp: {text!r}. "
            "Expected 4, 6, 8, 10, 12 or 14-23 digits"
        )

    def field(start: int, end: int, default: int) -> int:
        return int(text[start:end]) if length >= end else default

    date = DateTime(
        int(text[0:4]),
        field(4, 6, 1),
        field(6, 8, 1),
        field(8, 10, 0),
        field(10, 12, 0),
        field(12, 14, 0),
        nanosecond=_parse_fractional_seconds(text[14:]) if length > 14 else 0,
        timezone=Timezone.utc(),
    )
    return VariablePrecisionDateTime(date, granularity)


def _parse_fractional_seconds(frac_str: str) -> int:
    """Parse a 1-9 digit fraction of a second to nanoseconds.

    Examples:
        >>> _parse_fractional_seconds("5")
        500000000
        >>> _parse_fractional_seconds("123456789")
        123456789
    """
    return int(frac_str.ljust(9, "0"))


def format_at_granularity(value: VariablePrecisionDateTime) -> str:
    """Render a value in the extended layout matching its granularity.

    Layouts with a time part end in the offset ("Z" for UTC).

    Examples:
        >>> from vardate.core.variable_precision import VariablePrecisionDateTime
        >>> format_at_granularity(VariablePrecisionDateTime.of("2016-02"))
        '2016-02'

        >>> format_at_granularity(VariablePrecisionDateTime.of("2016-02-15T10:30+01:00"))
        '2016-02-15T10:30+01:00'
    """
    from vardate.core.datetime import format_offset

    date = value.date
    year_str = f"{date.year:04d}" if date.year >= 0 else f"{date.year:05d}"
    day_str = f"{year_str}-{date.month:02d}-{date.day:02d}"
    offset = format_offset(date.timezone)

    granularity = value.granularity
    match granularity:
        case Granularity.YEAR:
            return year_str
        case Granularity.MONTH:
            return f"{year_str}-{date.month:02d}"
        case Granularity.DAY:
            return day_str
        case Granularity.HOUR:
            return f"{day_str}T{date.hour:02d}{offset}"
        case Granularity.MINUTE:
            return f"{day_str}T{date.hour:02d}:{date.minute:02d}{offset}"
        case Granularity.SECOND:
            return (
                f"{day_str}T{date.hour:02d}:{date.minute:02d}:{date.second:02d}"
                f"{offset}"
            )
        case Granularity.NANOSECOND:
            return date.to_iso_format(precision="nanos")
        case _:
            assert_never(granularity)


__all__ = ["parse_variable_precision", "format_at_granularity"]
