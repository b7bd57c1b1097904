"""Internal utilities for vardate.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar arithmetic
    - Component validation
    - The @deprecated decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from vardate._internal.decorators import deprecated
from vardate._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_result_year,
    validate_year,
)

__all__: list[str] = [
    "deprecated",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
    "validate_result_year",
]
