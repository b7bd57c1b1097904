"""Tests for the DateTime class."""

from __future__ import annotations

import pytest

from vardate.core.datetime import DateTime
from vardate.errors import ParseError, ValidationError
from vardate.units.timezone import Timezone


class TestDateTimeConstruction:
    """Test DateTime construction."""

    def test_basic_construction(self) -> None:
        """All components are stored and UTC is the default offset."""
        dt = DateTime(2016, 2, 15, 14, 30, 45, nanosecond=123_456_789)
        assert dt.year == 2016
        assert dt.month == 2
        assert dt.day == 15
        assert dt.hour == 14
        assert dt.minute == 30
        assert dt.second == 45
        assert dt.nanosecond == 123_456_789
        assert dt.microsecond == 123_456
        assert dt.millisecond == 123
        assert dt.timezone.is_utc

    def test_construction_with_timezone(self) -> None:
        """An explicit offset is kept."""
        tz = Timezone.from_hours(2)
        dt = DateTime(2016, 2, 15, 12, timezone=tz)
        assert dt.timezone == tz
        assert dt.hour == 12

    def test_negative_year(self) -> None:
        """BCE years are supported."""
        dt = DateTime(-44, 3, 15)
        assert dt.year == -44


class TestDateTimeValidation:
    """Test DateTime validation."""

    @pytest.mark.parametrize(
        "args",
        [
            (10000, 1, 1),
            (2016, 13, 1),
            (2016, 0, 1),
            (2015, 2, 29),
            (2016, 4, 31),
            (2016, 1, 1, 24),
            (2016, 1, 1, 0, 60),
            (2016, 1, 1, 0, 0, 60),
        ],
    )
    def test_invalid_components(self, args: tuple[int, ...]) -> None:
        """Out of range components raise ValidationError."""
        with pytest.raises(ValidationError):
            DateTime(*args)

    def test_invalid_nanosecond(self) -> None:
        """Nanoseconds must be below one second."""
        with pytest.raises(ValidationError):
            DateTime(2016, 1, 1, nanosecond=1_000_000_000)


class TestDateTimeArithmetic:
    """Test fixed and calendar unit arithmetic."""

    def test_add_nanoseconds_carries_into_next_day(self) -> None:
        """One nanosecond before midnight rolls into the next day."""
        dt = DateTime(2016, 12, 31, 23, 59, 59, nanosecond=999_999_999)
        assert dt.add_nanoseconds(1) == DateTime(2017, 1, 1)

    def test_add_seconds_minutes_hours(self) -> None:
        """Fixed units add along the timeline."""
        dt = DateTime(2016, 2, 28, 23, 59, 59)
        assert dt.add_seconds(1) == DateTime(2016, 2, 29)
        assert dt.add_minutes(1) == DateTime(2016, 2, 29, 0, 0, 59)
        assert dt.add_hours(1) == DateTime(2016, 2, 29, 0, 59, 59)

    def test_negative_offsets(self) -> None:
        """Negative amounts move backwards."""
        assert DateTime(2016, 1, 1).add_nanoseconds(-1) == DateTime(
            2015, 12, 31, 23, 59, 59, nanosecond=999_999_999
        )
        assert DateTime(2016, 3, 1).add_days(-1) == DateTime(2016, 2, 29)

    def test_add_days_leap_year(self) -> None:
        """Feb 28 plus one day is Feb 29 in a leap year."""
        assert DateTime(2016, 2, 28).add_days(1) == DateTime(2016, 2, 29)
        assert DateTime(2015, 2, 28).add_days(1) == DateTime(2015, 3, 1)

    def test_add_months(self) -> None:
        """Months are added in calendar terms with clamping."""
        assert DateTime(2016, 1, 1).add_months(1) == DateTime(2016, 2, 1)
        assert DateTime(2016, 12, 1).add_months(1) == DateTime(2017, 1, 1)
        assert DateTime(2016, 1, 31, 10).add_months(1) == DateTime(2016, 2, 29, 10)

    def test_add_years(self) -> None:
        """Years are added in calendar terms."""
        assert DateTime(2016, 1, 1).add_years(1) == DateTime(2017, 1, 1)
        assert DateTime(2016, 2, 29).add_years(1) == DateTime(2017, 2, 28)
        assert DateTime(2015, 3, 1).add_years(1) == DateTime(2016, 3, 1)

    def test_arithmetic_keeps_timezone(self) -> None:
        """Results stay in the original offset."""
        tz = Timezone.from_hours(-5)
        dt = DateTime(2016, 1, 31, 22, timezone=tz)
        assert dt.add_hours(3).timezone == tz
        assert dt.add_hours(3).day == 1
        assert dt.add_months(1).timezone == tz

    def test_step_into_year_10000(self) -> None:
        """Stepping one unit past year 9999 lands on year 10000."""
        assert DateTime(9999, 12, 1).add_months(1).to_iso_format() == "10000-01-01T00:00:00Z"
        assert (
            DateTime(9999, 12, 31, 23, 59, 59).add_seconds(1).to_iso_format()
            == "10000-01-01T00:00:00Z"
        )

    def test_overflow_past_result_year(self) -> None:
        """Arithmetic past year 10000 raises ValidationError."""
        with pytest.raises(ValidationError):
            DateTime(9999, 12, 1).add_months(13)
        with pytest.raises(ValidationError):
            DateTime(9999, 12, 31).add_days(367)
        with pytest.raises(ValidationError):
            DateTime(-9999, 1, 1).add_years(-2)

    def test_immutability(self) -> None:
        """Arithmetic returns new objects and leaves the original alone."""
        dt = DateTime(2016, 1, 1)
        dt.add_years(1)
        assert dt == DateTime(2016, 1, 1)


class TestDateTimeTimezones:
    """Test offset handling."""

    def test_astimezone_same_instant(self) -> None:
        """Converting offset keeps the instant."""
        dt = DateTime(2016, 1, 1)
        local = dt.astimezone(Timezone.from_hours(-5))
        assert (local.year, local.month, local.day, local.hour) == (2015, 12, 31, 19)
        assert local == dt

    def test_to_utc(self) -> None:
        """to_utc shifts wall time to UTC."""
        dt = DateTime(2016, 2, 15, 17, 30, timezone=Timezone.from_hours(5, 30))
        utc = dt.to_utc()
        assert utc.hour == 12
        assert utc.minute == 0
        assert utc.timezone.is_utc

    def test_unix_nanos_round_trip(self) -> None:
        """from_unix_nanos inverts to_unix_nanos."""
        dt = DateTime(2016, 2, 15, 10, 30, 0, nanosecond=5, timezone=Timezone.from_hours(1))
        nanos = dt.to_unix_nanos()
        assert DateTime.from_unix_nanos(nanos) == dt
        assert DateTime.from_unix_nanos(0) == DateTime(1970, 1, 1)

    def test_unix_nanos_before_epoch(self) -> None:
        """Negative timestamps are before 1970."""
        assert DateTime(1969, 12, 31, 23, 59, 59).to_unix_nanos() == -1_000_000_000


class TestDateTimeComparison:
    """Test equality, ordering and hashing."""

    def test_equal_across_offsets(self) -> None:
        """The same instant in different offsets is equal."""
        a = DateTime(2016, 2, 15, 10, timezone=Timezone.from_hours(2))
        b = DateTime(2016, 2, 15, 8)
        assert a == b
        assert hash(a) == hash(b)

    def test_ordering(self) -> None:
        """Earlier instants compare less."""
        a = DateTime(2016, 2, 15)
        b = a.add_nanoseconds(1)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert not a > b

    def test_ordering_across_offsets(self) -> None:
        """Ordering uses the absolute instant, not wall time."""
        east = DateTime(2016, 2, 15, 10, timezone=Timezone.from_hours(5))
        utc = DateTime(2016, 2, 15, 6)
        assert east < utc

    def test_not_equal_to_other_types(self) -> None:
        """Comparison with other types is never equal."""
        assert DateTime(2016, 1, 1) != "2016-01-01T00:00:00Z"


class TestDateTimeFormatting:
    """Test ISO output and parsing."""

    def test_to_iso_format(self) -> None:
        """Default precision omits zero fractions."""
        assert DateTime(2016, 2, 15).to_iso_format() == "2016-02-15T00:00:00Z"
        dt = DateTime(2016, 2, 15, nanosecond=120_000_000, timezone=Timezone.from_hours(-5))
        assert dt.to_iso_format() == "2016-02-15T00:00:00.12-05:00"

    @pytest.mark.parametrize(
        ("precision", "expected"),
        [
            ("seconds", "2016-02-15T10:30:45Z"),
            ("millis", "2016-02-15T10:30:45.123Z"),
            ("micros", "2016-02-15T10:30:45.123456Z"),
            ("nanos", "2016-02-15T10:30:45.123456789Z"),
        ],
    )
    def test_precisions(self, precision: str, expected: str) -> None:
        """Fixed precisions always print the requested digits."""
        dt = DateTime(2016, 2, 15, 10, 30, 45, nanosecond=123_456_789)
        assert dt.to_iso_format(precision=precision) == expected

    def test_unknown_precision(self) -> None:
        """Unknown precision names raise ValueError."""
        with pytest.raises(ValueError):
            DateTime(2016, 1, 1).to_iso_format(precision="picos")

    def test_negative_year_format(self) -> None:
        """BCE years print with a sign and four digits."""
        assert DateTime(-44, 3, 15).to_iso_format() == "-0044-03-15T00:00:00Z"

    def test_from_iso_format(self) -> None:
        """Parsing accepts any supported precision."""
        assert DateTime.from_iso_format("2016-02") == DateTime(2016, 2, 1)
        assert DateTime.from_iso_format("2016-02-15T10:30:00+01:00") == DateTime(
            2016, 2, 15, 9, 30
        )

    def test_from_iso_format_invalid(self) -> None:
        """Garbage raises ParseError."""
        with pytest.raises(ParseError):
            DateTime.from_iso_format("next tuesday")

    def test_str_and_repr(self) -> None:
        """str() is ISO and repr() lists components."""
        dt = DateTime(2016, 2, 15, 10)
        assert str(dt) == "2016-02-15T10:00:00Z"
        assert repr(dt) == "DateTime(2016, 2, 15, 10, 0, 0, nanosecond=0, timezone=UTC)"
