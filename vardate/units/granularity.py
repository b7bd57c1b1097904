"""Granularity enumeration for variable precision dates.

This module provides the Granularity enum naming the precision at which
a date was originally written, from nanoseconds up to years.
"""

from __future__ import annotations

import functools
from enum import Enum

from vardate._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


@functools.total_ordering
class Granularity(Enum):
    """Precision of a date value, ordered finest to coarsest.

    Members compare by precision: a finer granularity is "less than" a
    coarser one, so ``Granularity.DAY < Granularity.MONTH``.

    Note:
        MONTH and YEAR have no fixed length in nanoseconds. The
        unit_nanos() method returns None for these.

    Examples:
        >>> Granularity.SECOND < Granularity.HOUR
        True

        >>> Granularity.DAY.unit_nanos()
        86400000000000

        >>> Granularity.MONTH.unit_nanos() is None
        True
    """

    NANOSECOND = "nanosecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def rank(self) -> int:
        """Return the position of this granularity, 0 for NANOSECOND."""
        return _ORDER.index(self)

    def is_finer_than(self, other: Granularity) -> bool:
        """Return True if this granularity is more precise than other."""
        return self.rank < other.rank

    def unit_nanos(self) -> int | None:
        """Return the length of one unit in nanoseconds.

        Returns:
            Nanoseconds in one unit, or None for the calendar-dependent
            units MONTH and YEAR.
        """
        conversions: dict[Granularity, int | None] = {
            Granularity.NANOSECOND: 1,
            Granularity.SECOND: NANOS_PER_SECOND,
            Granularity.MINUTE: NANOS_PER_MINUTE,
            Granularity.HOUR: NANOS_PER_HOUR,
            Granularity.DAY: NANOS_PER_DAY,
            Granularity.MONTH: None,  # 28-31 days
            Granularity.YEAR: None,  # 365 or 366 days
        }
        return conversions[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Granularity):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value


_ORDER: tuple[Granularity, ...] = tuple(Granularity)


__all__ = ["Granularity"]
