"""Text conversion for variable precision dates.

Functions:
    parse_variable_precision: Decode ISO 8601 or compact text.
    format_at_granularity: Render a value at its own precision.
"""

from __future__ import annotations

from vardate.format.iso8601 import format_at_granularity, parse_variable_precision

__all__: list[str] = [
    "parse_variable_precision",
    "format_at_granularity",
]
