"""Temporal units and enumerations.

This module provides:
    - Granularity: Date precision from NANOSECOND to YEAR
    - Timezone: UTC offset-based timezone representation
"""

from __future__ import annotations

from vardate.units.granularity import Granularity
from vardate.units.timezone import Timezone

__all__: list[str] = [
    "Granularity",
    "Timezone",
]
