"""Tests for variable precision parsing and formatting."""

from __future__ import annotations

import pytest

from vardate.core.datetime import DateTime
from vardate.core.variable_precision import VariablePrecisionDateTime
from vardate.errors import ParseError, TimezoneError, ValidationError
from vardate.format import format_at_granularity, parse_variable_precision
from vardate.units.granularity import Granularity
from vardate.units.timezone import Timezone


class TestParseExtended:
    """Tests for ISO 8601 extended layouts."""

    @pytest.mark.parametrize(
        ("text", "expected", "granularity"),
        [
            ("2016", DateTime(2016, 1, 1), Granularity.YEAR),
            ("2016-02", DateTime(2016, 2, 1), Granularity.MONTH),
            ("2016-02-15", DateTime(2016, 2, 15), Granularity.DAY),
            ("2016-02-15T10", DateTime(2016, 2, 15, 10), Granularity.HOUR),
            ("2016-02-15T10:30", DateTime(2016, 2, 15, 10, 30), Granularity.MINUTE),
            ("2016-02-15T10:30:45", DateTime(2016, 2, 15, 10, 30, 45), Granularity.SECOND),
            (
                "2016-02-15T10:30:45.5",
                DateTime(2016, 2, 15, 10, 30, 45, nanosecond=500_000_000),
                Granularity.NANOSECOND,
            ),
            (
                "2016-02-15T10:30:45.123456789",
                DateTime(2016, 2, 15, 10, 30, 45, nanosecond=123_456_789),
                Granularity.NANOSECOND,
            ),
        ],
    )
    def test_layouts(self, text: str, expected: DateTime, granularity: Granularity) -> None:
        """Each layout yields its instant and granularity."""
        result = parse_variable_precision(text)
        assert result.date == expected
        assert result.granularity is granularity

    def test_space_separator(self) -> None:
        """A space may stand in for T."""
        result = parse_variable_precision("2016-02-15 10:30")
        assert result.date == DateTime(2016, 2, 15, 10, 30)
        assert result.granularity is Granularity.MINUTE

    def test_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is ignored."""
        assert parse_variable_precision("  2016-02 \n").granularity is Granularity.MONTH

    def test_default_offset_is_utc(self) -> None:
        """Text without an offset is UTC."""
        assert parse_variable_precision("2016-02-15T10").date.timezone.is_utc

    @pytest.mark.parametrize(
        ("text", "offset"),
        [
            ("2016-02-15T10:30Z", 0),
            ("2016-02-15T10:30+01:00", 3600),
            ("2016-02-15T10:30-0530", -19800),
            ("2016-02-15T10-05", -18000),
            ("2016-02-15T10:30:45.25+02", 7200),
        ],
    )
    def test_offsets(self, text: str, offset: int) -> None:
        """Offsets after a time part are kept on the instant."""
        result = parse_variable_precision(text)
        assert result.date.timezone == Timezone(offset)

    def test_offset_does_not_change_wall_time(self) -> None:
        """The written wall-clock fields are kept as written."""
        result = parse_variable_precision("2016-02-15T10:30+01:00")
        assert result.date.hour == 10
        assert result.date.to_utc().hour == 9

    def test_negative_year(self) -> None:
        """Signed years decode."""
        result = parse_variable_precision("-0044-03")
        assert result.date.year == -44
        assert result.granularity is Granularity.MONTH


class TestParseCompact:
    """Tests for compact web archive timestamps."""

    @pytest.mark.parametrize(
        ("text", "expected", "granularity"),
        [
            ("201602", DateTime(2016, 2, 1), Granularity.MONTH),
            ("20160215", DateTime(2016, 2, 15), Granularity.DAY),
            ("2016021510", DateTime(2016, 2, 15, 10), Granularity.HOUR),
            ("201602151030", DateTime(2016, 2, 15, 10, 30), Granularity.MINUTE),
            ("20160215103045", DateTime(2016, 2, 15, 10, 30, 45), Granularity.SECOND),
            (
                "20160215103045123",
                DateTime(2016, 2, 15, 10, 30, 45, nanosecond=123_000_000),
                Granularity.NANOSECOND,
            ),
        ],
    )
    def test_lengths(self, text: str, expected: DateTime, granularity: Granularity) -> None:
        """Digit count selects the granularity."""
        result = parse_variable_precision(text)
        assert result.date == expected
        assert result.granularity is granularity

    @pytest.mark.parametrize("text", ["20160", "2016021", "201602151", "2" * 24])
    def test_bad_lengths(self, text: str) -> None:
        """Unsupported digit counts raise ParseError."""
        with pytest.raises(ParseError):
            parse_variable_precision(text)


class TestParseErrors:
    """Tests for rejected input."""

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "2016/02/15", "16-02-15", "2016-2-15", "2016-02T10", "2016-02-15T", "2016-02-15T10:3"],
    )
    def test_parse_errors(self, text: str) -> None:
        """Malformed text raises ParseError."""
        with pytest.raises(ParseError):
            parse_variable_precision(text)

    @pytest.mark.parametrize(
        "text", ["201602²0", "2016²", "²⁰¹⁶", "２０１６", "２０１６０２１５", "2016-02-15T1０"]
    )
    def test_non_ascii_digits(self, text: str) -> None:
        """Digits outside ASCII raise ParseError, not ValueError."""
        with pytest.raises(ParseError):
            parse_variable_precision(text)
        with pytest.raises(ParseError):
            VariablePrecisionDateTime.of(text)

    def test_non_string(self) -> None:
        """Non-string input raises ParseError."""
        with pytest.raises(ParseError):
            parse_variable_precision(2016)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["2016-13", "2015-02-29", "2016-02-15T24", "20161301"])
    def test_validation_errors(self, text: str) -> None:
        """Well-formed text with impossible values raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_variable_precision(text)

    def test_offset_out_of_range(self) -> None:
        """Offsets beyond 14 hours raise TimezoneError."""
        with pytest.raises(TimezoneError):
            parse_variable_precision("2016-02-15T10:00+15:00")


class TestFormatAtGranularity:
    """Tests for rendering at a value's own precision."""

    @pytest.mark.parametrize(
        ("granularity", "expected"),
        [
            (Granularity.YEAR, "2016"),
            (Granularity.MONTH, "2016-02"),
            (Granularity.DAY, "2016-02-15"),
            (Granularity.HOUR, "2016-02-15T10Z"),
            (Granularity.MINUTE, "2016-02-15T10:30Z"),
            (Granularity.SECOND, "2016-02-15T10:30:45Z"),
            (Granularity.NANOSECOND, "2016-02-15T10:30:45.000000007Z"),
        ],
    )
    def test_each_granularity(self, granularity: Granularity, expected: str) -> None:
        """Each granularity renders only the fields it covers."""
        value = VariablePrecisionDateTime(
            DateTime(2016, 2, 15, 10, 30, 45, nanosecond=7), granularity
        )
        assert format_at_granularity(value) == expected

    def test_offset_rendered(self) -> None:
        """Non-UTC offsets are printed for time layouts."""
        value = parse_variable_precision("2016-02-15T10:30-05:00")
        assert format_at_granularity(value) == "2016-02-15T10:30-05:00"

    @pytest.mark.parametrize(
        "text",
        ["2016", "2016-02", "2016-02-15", "2016-02-15T10:30Z", "2016-02-15T10:30:45+01:00"],
    )
    def test_extended_text_round_trips(self, text: str) -> None:
        """Formatting gives back canonical extended text."""
        assert format_at_granularity(parse_variable_precision(text)) == text
