"""Internal constants for vardate.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Arithmetic results may sit one year past the limits so that an
# exclusive range end after 9999-12-31 is representable
MIN_RESULT_YEAR: int = MIN_YEAR - 1
MAX_RESULT_YEAR: int = MAX_YEAR + 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# MJD (Modified Julian Day) reference points
# MJD 0 = 1858-11-17 00:00 UTC
MJD_UNIX_EPOCH: int = 40587  # 1970-01-01 00:00 UTC

# UTC offset limits (in seconds); Pacific/Kiritimati is UTC+14
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR

# Offset applied to decoded text that carries none
DEFAULT_OFFSET_SECONDS: int = 0


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_RESULT_YEAR",
    "MAX_RESULT_YEAR",
    "DAYS_IN_MONTH",
    "MJD_UNIX_EPOCH",
    "MAX_UTC_OFFSET_SECONDS",
    "DEFAULT_OFFSET_SECONDS",
]
