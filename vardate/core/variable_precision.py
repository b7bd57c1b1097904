"""VariablePrecisionDateTime: a DateTime tagged with its precision.

A date written as "2016-02" names a whole month, not the first instant of
it. VariablePrecisionDateTime keeps the instant together with the
Granularity it was written at so that later code can widen it into the
range of instants it stands for.
"""

from __future__ import annotations

from vardate.core.datetime import DateTime
from vardate.units.granularity import Granularity


class VariablePrecisionDateTime:
    """An instant plus the granularity at which it was specified.

    The constructor trusts its input: fields finer than the granularity
    are expected to be zero already. Use truncated() to zero them.

    Attributes:
        date: The instant, with finer fields zeroed by the producer.
        granularity: The precision the date was written at.

    Examples:
        >>> v = VariablePrecisionDateTime.of("2016-02")
        >>> v.granularity
        <Granularity.MONTH: 'month'>
        >>> v.date.day
        1
    """

    __slots__ = ("_date", "_granularity")

    def __init__(self, date: DateTime, granularity: Granularity) -> None:
        if not isinstance(date, DateTime):
            raise TypeError(f"expected DateTime, got {type(date).__name__}")
        if not isinstance(granularity, Granularity):
            raise TypeError(
                f"expected Granularity, got {type(granularity).__name__}"
            )
        self._date = date
        self._granularity = granularity

    @classmethod
    def of(cls, text: str) -> VariablePrecisionDateTime:
        """Decode text such as "2016", "2016-02-15T10:00Z" or "20160215".

        Raises:
            ParseError: If the text is not a recognised layout.
            ValidationError: If a component is out of range.
        """
        from vardate.format.iso8601 import parse_variable_precision

        return parse_variable_precision(text)

    @classmethod
    def truncated(
        cls, date: DateTime, granularity: Granularity
    ) -> VariablePrecisionDateTime:
        """Zero every field of date finer than granularity and tag it.

        Examples:
            >>> v = VariablePrecisionDateTime.truncated(
            ...     DateTime(2016, 2, 15, 10, 30), Granularity.DAY)
            >>> v.date
            DateTime(2016, 2, 15, 0, 0, 0, nanosecond=0, timezone=UTC)
        """
        fields: dict[str, int] = {}
        if granularity.rank >= Granularity.SECOND.rank:
            fields["nanosecond"] = 0
        if granularity.rank >= Granularity.MINUTE.rank:
            fields["second"] = 0
        if granularity.rank >= Granularity.HOUR.rank:
            fields["minute"] = 0
        if granularity.rank >= Granularity.DAY.rank:
            fields["hour"] = 0
        if granularity.rank >= Granularity.MONTH.rank:
            fields["day"] = 1
        if granularity.rank >= Granularity.YEAR.rank:
            fields["month"] = 1
        return cls(date.replace(**fields), granularity)

    @property
    def date(self) -> DateTime:
        return self._date

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    def with_granularity(self, granularity: Granularity) -> VariablePrecisionDateTime:
        """Return the same instant re-tagged, without truncating."""
        if granularity is self._granularity:
            return self
        return VariablePrecisionDateTime(self._date, granularity)

    def to_formatted_string(self) -> str:
        """Render the value in the ISO layout matching its granularity."""
        from vardate.format.iso8601 import format_at_granularity

        return format_at_granularity(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariablePrecisionDateTime):
            return NotImplemented
        return self._date == other._date and self._granularity is other._granularity

    def __hash__(self) -> int:
        return hash((self._date, self._granularity))

    def __repr__(self) -> str:
        return (
            f"VariablePrecisionDateTime({self._date.to_iso_format()!r}, "
            f"{self._granularity.name})"
        )

    def __str__(self) -> str:
        return self.to_formatted_string()


__all__ = ["VariablePrecisionDateTime"]
