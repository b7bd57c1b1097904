"""Core temporal types.

This module provides:
    - DateTime: Absolute instant with nanosecond precision and UTC offset
    - VariablePrecisionDateTime: DateTime tagged with its Granularity
    - DateTimeRange: Half-open [start, end) search range
"""

from __future__ import annotations

from vardate.core.datetime import DateTime
from vardate.core.range import DateTimeRange
from vardate.core.variable_precision import VariablePrecisionDateTime

__all__: list[str] = [
    "DateTime",
    "DateTimeRange",
    "VariablePrecisionDateTime",
]
