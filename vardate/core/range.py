"""DateTimeRange: a half-open [start, end) range of instants for searching.

As dates are allowed to be of variable precision, a range can be computed
from a single date covering every instant that the date stands for. A
range can also be built from explicit start and end dates; leaving either
out makes that side open ended.
"""

from __future__ import annotations

import logging
from typing import Union, assert_never

from vardate._internal.decorators import deprecated
from vardate.core.datetime import DateTime
from vardate.core.variable_precision import VariablePrecisionDateTime
from vardate.units.granularity import Granularity

logger = logging.getLogger(__name__)

# Anything the factories accept as one endpoint
DateInput = Union[VariablePrecisionDateTime, str]


def _coerce(value: DateInput | None) -> VariablePrecisionDateTime | None:
    if value is None or isinstance(value, VariablePrecisionDateTime):
        return value
    if isinstance(value, str):
        return VariablePrecisionDateTime.of(value)
    raise TypeError(
        f"expected VariablePrecisionDateTime, str or None, got {type(value).__name__}"
    )


def _advance_one_unit(date: DateTime, granularity: Granularity) -> DateTime:
    """Return date moved forward by exactly one unit of granularity."""
    match granularity:
        case Granularity.NANOSECOND:
            return date.add_nanoseconds(1)
        case Granularity.SECOND:
            return date.add_seconds(1)
        case Granularity.MINUTE:
            return date.add_minutes(1)
        case Granularity.HOUR:
            return date.add_hours(1)
        case Granularity.DAY:
            return date.add_days(1)
        case Granularity.MONTH:
            return date.add_months(1)
        case Granularity.YEAR:
            return date.add_years(1)
        case _:
            assert_never(granularity)


class DateTimeRange:
    """An immutable range of instants, start inclusive and end exclusive.

    Either side may be absent, meaning the range is unbounded in that
    direction. Present sides always carry NANOSECOND granularity: the
    precision of the input is used while building the range and then
    dropped.

    No ordering between start and end is enforced. An inverted range is
    accepted as given and contains nothing.

    Examples:
        >>> r = DateTimeRange.of_single_date("2016-02-15")
        >>> r.start_date.to_iso_format(precision="nanos")
        '2016-02-15T00:00:00.000000000Z'
        >>> r.end_date.to_iso_format(precision="nanos")
        '2016-02-16T00:00:00.000000000Z'

        >>> DateTimeRange.start("2016-02-15").has_end()
        False
    """

    __slots__ = ("_start", "_end")

    def __init__(
        self,
        start: VariablePrecisionDateTime | None,
        end: VariablePrecisionDateTime | None,
    ) -> None:
        """Create a range from optional endpoints, re-tagged to NANOSECOND.

        Prefer the factory classmethods; this does no widening.
        """
        self._start: VariablePrecisionDateTime | None = (
            start.with_granularity(Granularity.NANOSECOND) if start is not None else None
        )
        self._end: VariablePrecisionDateTime | None = (
            end.with_granularity(Granularity.NANOSECOND) if end is not None else None
        )

    @classmethod
    def of_single_date(cls, date: DateInput) -> DateTimeRange:
        """Widen one date into the range of instants it stands for.

        The start is the date itself; the end is the date advanced by one
        unit of its granularity. Months and years are advanced in calendar
        terms, so "2016-12" ends at 2017-01-01T00:00:00Z.

        Args:
            date: A VariablePrecisionDateTime, or text to decode into one.

        Raises:
            ParseError: If date is text that cannot be decoded.
            ValidationError: If date is text with out of range components.

        A valid date always widens; a year 9999 date ends in year 10000.

        Examples:
            >>> r = DateTimeRange.of_single_date("2016")
            >>> str(r)
            '[2016-01-01T00:00:00Z, 2017-01-01T00:00:00Z)'
        """
        value = _coerce(date)
        if value is None:
            raise TypeError("of_single_date() requires a date, got None")

        end = _advance_one_unit(value.date, value.granularity)
        logger.debug(
            "widened %s at %s granularity to [%s, %s)",
            value.date, value.granularity, value.date, end,
        )
        return cls(value, VariablePrecisionDateTime(end, value.granularity))

    @classmethod
    def between(
        cls,
        start_inclusive: DateInput | None,
        end_exclusive: DateInput | None,
    ) -> DateTimeRange:
        """Build a range from two dates, either of which may be None.

        Present dates are used exactly as given; no widening is applied.

        Examples:
            >>> r = DateTimeRange.between("2016-01", None)
            >>> r.has_start(), r.has_end()
            (True, False)
        """
        return cls(_coerce(start_inclusive), _coerce(end_exclusive))

    @classmethod
    def start(cls, start_inclusive: DateInput) -> DateTimeRange:
        """Build a range from start_inclusive with no end."""
        return cls.between(start_inclusive, None)

    @classmethod
    def end(cls, end_exclusive: DateInput) -> DateTimeRange:
        """Build a range up to end_exclusive with no start."""
        return cls.between(None, end_exclusive)

    # Accessors

    def has_start(self) -> bool:
        """Return True if the range has a start; False means unbounded past."""
        return self._start is not None

    def has_end(self) -> bool:
        """Return True if the range has an end; False means unbounded future."""
        return self._end is not None

    def get_start(self) -> VariablePrecisionDateTime | None:
        return self._start

    def get_end(self) -> VariablePrecisionDateTime | None:
        return self._end

    @property
    def start_date(self) -> DateTime | None:
        """The inclusive lower bound as a bare DateTime, or None."""
        return self._start.date if self._start is not None else None

    @property
    def end_date(self) -> DateTime | None:
        """The exclusive upper bound as a bare DateTime, or None."""
        return self._end.date if self._end is not None else None

    @property
    def is_bounded(self) -> bool:
        return self._start is not None and self._end is not None

    @deprecated("use has_start() instead")
    def has_start_date(self) -> bool:
        return self.has_start()

    @deprecated("use has_end() instead")
    def has_end_date(self) -> bool:
        return self.has_end()

    def contains(self, instant: DateTime | VariablePrecisionDateTime) -> bool:
        """Check whether instant lies in [start, end).

        A VariablePrecisionDateTime is tested by its instant only.

        Examples:
            >>> r = DateTimeRange.of_single_date("2016-02")
            >>> r.contains(DateTime(2016, 2, 29, 23, 59, 59, nanosecond=999_999_999))
            True
            >>> r.contains(DateTime(2016, 3, 1))
            False
        """
        point = instant.date if isinstance(instant, VariablePrecisionDateTime) else instant

        if self._start is not None and point < self._start.date:
            return False
        if self._end is not None and point >= self._end.date:
            return False
        return True

    def __contains__(self, instant: DateTime | VariablePrecisionDateTime) -> bool:
        return self.contains(instant)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeRange):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        start = (
            self._start.date.to_iso_format(precision="nanos")
            if self._start is not None
            else None
        )
        end = (
            self._end.date.to_iso_format(precision="nanos")
            if self._end is not None
            else None
        )
        return f"DateTimeRange(start={start!r}, end={end!r})"

    def __str__(self) -> str:
        start = str(self.start_date) if self._start is not None else "-inf"
        end = str(self.end_date) if self._end is not None else "+inf"
        return f"[{start}, {end})"


__all__ = ["DateTimeRange"]
