"""DateTime class: an absolute instant with nanosecond precision.

This module provides the DateTime class, a calendar date and time of day
carrying a fixed UTC offset. Every DateTime is offset-aware; when no
timezone is given UTC is assumed.
"""

from __future__ import annotations

from vardate._internal.calendar import add_months, mjd_to_ymd, ymd_to_mjd
from vardate._internal.constants import (
    MJD_UNIX_EPOCH,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from vardate._internal.validation import (
    validate_day,
    validate_month,
    validate_result_year,
    validate_time,
    validate_year,
)
from vardate.units.timezone import Timezone


class DateTime:
    """A combined date and time with a UTC offset.

    The internal representation uses Modified Julian Day (MJD) for the
    local date and nanoseconds since local midnight for the time, plus the
    Timezone that relates the two to UTC.

    Equality, ordering and hashing are by absolute instant: two values with
    different offsets that denote the same moment are equal.

    Attributes:
        year: The year component (can be negative for BCE).
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond component (0-999999999).
        timezone: The UTC offset.

    Examples:
        >>> dt = DateTime(2016, 2, 15, 10, 30)
        >>> dt.timezone.is_utc
        True

        >>> DateTime(2016, 2, 15, 12, timezone=Timezone.from_hours(2)) == DateTime(2016, 2, 15, 10)
        True
    """

    __slots__ = ("_days", "_nanos", "_tz")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        timezone: Timezone | None = None,
    ) -> None:
        """Create a DateTime from component parts.

        Args:
            year: The year (can be 0 or negative for BCE dates).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).
            timezone: UTC offset, UTC when omitted.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        validate_time(hour, minute, second, nanosecond)

        self._days: int = ymd_to_mjd(year, month, day)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )
        self._tz: Timezone = timezone if timezone is not None else Timezone.utc()

    @classmethod
    def _from_internal(cls, days: int, nanos: int, tz: Timezone) -> DateTime:
        """Create a DateTime from MJD days and nanos since midnight.

        Nanos may fall outside a single day; the excess is carried into
        days. The resulting year may lie one past the constructor limits.
        """
        extra_days, nanos = divmod(nanos, NANOS_PER_DAY)
        days += extra_days
        year, _, _ = mjd_to_ymd(days)
        validate_result_year(year)

        instance = object.__new__(cls)
        instance._days = days
        instance._nanos = nanos
        instance._tz = tz
        return instance

    @classmethod
    def from_unix_nanos(cls, nanos: int, *, timezone: Timezone | None = None) -> DateTime:
        """Create a DateTime from nanoseconds since 1970-01-01T00:00:00Z.

        Args:
            nanos: Unix timestamp in nanoseconds.
            timezone: Offset for the result, UTC when omitted.

        Examples:
            >>> DateTime.from_unix_nanos(0)
            DateTime(1970, 1, 1, 0, 0, 0, nanosecond=0, timezone=UTC)
        """
        tz = timezone if timezone is not None else Timezone.utc()
        local_nanos = nanos + tz.offset_seconds * NANOS_PER_SECOND
        return cls._from_internal(MJD_UNIX_EPOCH, local_nanos, tz)

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse a datetime from ISO 8601 text of any supported precision.

        Missing trailing fields are zero, so "2016-02" is
        2016-02-01T00:00:00Z.

        Raises:
            ParseError: If the text is not recognised.
            ValidationError: If the components are invalid.

        Examples:
            >>> DateTime.from_iso_format("2016-02-15T10:30:00+01:00")
            DateTime(2016, 2, 15, 10, 30, 0, nanosecond=0, timezone=+01:00)
        """
        from vardate.format.iso8601 import parse_variable_precision

        return parse_variable_precision(s).date

    # Properties - date components

    @property
    def year(self) -> int:
        year, _, _ = mjd_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        _, month, _ = mjd_to_ymd(self._days)
        return month

    @property
    def day(self) -> int:
        _, _, day = mjd_to_ymd(self._days)
        return day

    # Properties - time components

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return nanoseconds within the second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def timezone(self) -> Timezone:
        return self._tz

    # Timezone handling

    def astimezone(self, timezone: Timezone) -> DateTime:
        """Return the same instant expressed in another offset.

        Examples:
            >>> dt = DateTime(2016, 1, 1, 0, 0, 0)
            >>> dt.astimezone(Timezone.from_hours(-5)).day
            31
        """
        offset_diff = timezone.offset_seconds - self._tz.offset_seconds
        return DateTime._from_internal(
            self._days, self._nanos + offset_diff * NANOS_PER_SECOND, timezone
        )

    def to_utc(self) -> DateTime:
        """Return the same instant expressed in UTC."""
        return self.astimezone(Timezone.utc())

    def to_unix_nanos(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00:00Z."""
        local = (self._days - MJD_UNIX_EPOCH) * NANOS_PER_DAY + self._nanos
        return local - self._tz.offset_seconds * NANOS_PER_SECOND

    def replace(
        self,
        *,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> DateTime:
        """Return a new DateTime with the given fields replaced.

        The year and timezone are always kept.
        """
        return DateTime(
            self.year,
            month if month is not None else self.month,
            day if day is not None else self.day,
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            nanosecond=nanosecond if nanosecond is not None else self.nanosecond,
            timezone=self._tz,
        )

    # Arithmetic
    #
    # Fixed-length units move along the timeline. Days, months and years
    # move the local calendar date and keep the wall-clock time; with a
    # fixed offset these agree for days.

    def add_nanoseconds(self, nanoseconds: int) -> DateTime:
        """Return a new DateTime offset by the given nanoseconds.

        Raises:
            ValidationError: If the result is out of range.
        """
        return DateTime._from_internal(self._days, self._nanos + nanoseconds, self._tz)

    def add_seconds(self, seconds: int) -> DateTime:
        return self.add_nanoseconds(seconds * NANOS_PER_SECOND)

    def add_minutes(self, minutes: int) -> DateTime:
        return self.add_nanoseconds(minutes * NANOS_PER_MINUTE)

    def add_hours(self, hours: int) -> DateTime:
        return self.add_nanoseconds(hours * NANOS_PER_HOUR)

    def add_days(self, days: int) -> DateTime:
        """Return a new DateTime offset by whole calendar days.

        Examples:
            >>> DateTime(2016, 2, 28).add_days(1)
            DateTime(2016, 2, 29, 0, 0, 0, nanosecond=0, timezone=UTC)
        """
        return DateTime._from_internal(self._days + days, self._nanos, self._tz)

    def add_months(self, months: int) -> DateTime:
        """Return a new DateTime offset by calendar months.

        If the day does not exist in the target month it is clamped to the
        last day of that month.

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> DateTime(2016, 1, 31).add_months(1)
            DateTime(2016, 2, 29, 0, 0, 0, nanosecond=0, timezone=UTC)

            >>> DateTime(2016, 12, 1).add_months(1)
            DateTime(2017, 1, 1, 0, 0, 0, nanosecond=0, timezone=UTC)
        """
        year, month, day = mjd_to_ymd(self._days)
        new_year, new_month, new_day = add_months(year, month, day, months)
        validate_result_year(new_year)
        return DateTime._from_internal(
            ymd_to_mjd(new_year, new_month, new_day), self._nanos, self._tz
        )

    def add_years(self, years: int) -> DateTime:
        """Return a new DateTime offset by calendar years.

        Feb 29 becomes Feb 28 when the target year is not a leap year.

        Examples:
            >>> DateTime(2016, 2, 29).add_years(1)
            DateTime(2017, 2, 28, 0, 0, 0, nanosecond=0, timezone=UTC)
        """
        return self.add_months(years * 12)

    # ISO format

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return the datetime as an ISO 8601 string.

        Args:
            precision: Subsecond precision to include:
                - "auto": Include subseconds only if non-zero
                - "seconds": No subseconds
                - "millis": Always 3 decimal places
                - "micros": Always 6 decimal places
                - "nanos": Always 9 decimal places

        Examples:
            >>> DateTime(2016, 2, 15).to_iso_format()
            '2016-02-15T00:00:00Z'

            >>> DateTime(2016, 2, 15).to_iso_format(precision="nanos")
            '2016-02-15T00:00:00.000000000Z'
        """
        year, month, day = mjd_to_ymd(self._days)
        if year >= 0:
            date_str = f"{year:04d}-{month:02d}-{day:02d}"
        else:
            date_str = f"{year:05d}-{month:02d}-{day:02d}"

        time_str = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

        if precision == "seconds":
            pass
        elif precision == "millis":
            time_str += f".{self.millisecond:03d}"
        elif precision == "micros":
            time_str += f".{self.microsecond:06d}"
        elif precision == "nanos":
            time_str += f".{self.nanosecond:09d}"
        elif precision == "auto":
            if self.nanosecond != 0:
                frac = f"{self.nanosecond:09d}".rstrip("0")
                time_str += f".{frac}"
        else:
            raise ValueError(f"unknown precision: {precision!r}")

        return f"{date_str}T{time_str}{format_offset(self._tz)}"

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.to_unix_nanos() == other.to_unix_nanos()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.to_unix_nanos() < other.to_unix_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.to_unix_nanos() <= other.to_unix_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.to_unix_nanos() > other.to_unix_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.to_unix_nanos() >= other.to_unix_nanos()

    def __hash__(self) -> int:
        return hash(self.to_unix_nanos())

    def __repr__(self) -> str:
        year, month, day = mjd_to_ymd(self._days)
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, nanosecond={self.nanosecond}, timezone={self._tz})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


def format_offset(tz: Timezone) -> str:
    """Return "Z" for UTC, otherwise "+HH:MM" / "-HH:MM"."""
    return "Z" if tz.is_utc else str(tz)


__all__ = ["DateTime"]
