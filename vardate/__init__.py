"""Vardate: search ranges from dates of variable precision.

A date such as "2016-02" names a whole month. Vardate decodes such dates,
keeps track of the precision they were written at, and widens them into
half-open [start, end) ranges of nanosecond-precision instants.

Core Types:
    DateTime: Absolute instant with nanosecond precision and UTC offset
    VariablePrecisionDateTime: DateTime tagged with its Granularity
    DateTimeRange: Half-open search range with optional endpoints

Units:
    Granularity: Precision from NANOSECOND to YEAR
    Timezone: Fixed UTC offset

Format Functions:
    parse_variable_precision: Decode text into a VariablePrecisionDateTime
    format_at_granularity: Render a VariablePrecisionDateTime as text

Exceptions:
    VardateError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    TimezoneError: Invalid offset

Example:
    >>> from vardate import DateTimeRange
    >>> r = DateTimeRange.of_single_date("2016-12")
    >>> str(r)
    '[2016-12-01T00:00:00Z, 2017-01-01T00:00:00Z)'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from vardate.core.datetime import DateTime
from vardate.core.range import DateTimeRange
from vardate.core.variable_precision import VariablePrecisionDateTime

# Units
from vardate.units.granularity import Granularity
from vardate.units.timezone import Timezone

# Exceptions
from vardate.errors import (
    ParseError,
    TimezoneError,
    ValidationError,
    VardateError,
)

# Format functions
from vardate.format import format_at_granularity, parse_variable_precision

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "DateTimeRange",
    "VariablePrecisionDateTime",
    # Units
    "Granularity",
    "Timezone",
    # Exceptions
    "VardateError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    # Format functions
    "parse_variable_precision",
    "format_at_granularity",
]
