"""Internal constants for Datewise.

These constants define the defaults and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MICROS_PER_MILLISECOND: int = 1_000
MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# ISO weekday numbers (Monday is 1, Sunday is 7)
MONDAY: int = 1
FRIDAY: int = 5

# Last representable wall-clock time of a day at microsecond resolution
END_OF_DAY: tuple[int, int, int, int] = (23, 59, 59, 999_999)

# Configuration defaults
DEFAULT_LOCALE: str = "en"
DEFAULT_HOUR_CYCLE: str = "h23"
HOUR_CYCLES: tuple[str, ...] = ("h23", "h12")

# Environment variables read by Settings.from_env
ENV_LOCALE: str = "DATEWISE_LOCALE"
ENV_HOUR_CYCLE: str = "DATEWISE_HOUR_CYCLE"

# Literal text placed between rendered fields
FIELD_SEPARATOR: str = " "
DATE_TIME_SEPARATOR: str = " at "
TIME_SEPARATOR: str = ":"
RANGE_SEPARATOR: str = " - "


__all__ = [
    "MICROS_PER_MILLISECOND",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MONDAY",
    "FRIDAY",
    "END_OF_DAY",
    "DEFAULT_LOCALE",
    "DEFAULT_HOUR_CYCLE",
    "HOUR_CYCLES",
    "ENV_LOCALE",
    "ENV_HOUR_CYCLE",
    "FIELD_SEPARATOR",
    "DATE_TIME_SEPARATOR",
    "TIME_SEPARATOR",
    "RANGE_SEPARATOR",
]
