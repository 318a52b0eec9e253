"""Datewise: date and time convenience functions on top of pendulum.

Datewise parses ISO 8601 strings into typed values, converts between
instants, zoned datetimes, plain dates and times and stdlib ``datetime``
objects, and renders them as ISO strings, friendly text and relative
phrases.

Values:
    Instant: aware pendulum.DateTime in UTC
    ZonedDateTime: aware pendulum.DateTime in an IANA zone
    PlainDate / PlainTime: pendulum.Date / pendulum.Time
    PlainDateTime: naive pendulum.DateTime
    Duration: pendulum.Duration

Subpackages:
    datewise.format: ISO 8601, friendly and relative formatting
    datewise.convert: conversions between representations
    datewise.arithmetic: calendar calculations and comparisons
    datewise.units: timezone identifiers and relative-time units

Exceptions:
    DatewiseError: Base exception
    ParseError: String does not match the expected grammar
    UnresolvedZoneError: Unknown timezone identifier
    UnsupportedEnvironmentError: Locale data unavailable

Example:
    >>> from datewise import FixedClock, format_relative_instant, parse_instant
    >>> clock = FixedClock(parse_instant("2022-05-05T10:12:13Z"))
    >>> format_relative_instant(parse_instant("2022-05-05T10:12:22Z"), clock)
    'in 9 seconds'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Exceptions
from datewise.errors import (
    DatewiseError,
    ParseError,
    UnresolvedZoneError,
    UnsupportedEnvironmentError,
)

# Configuration
from datewise.config import Settings, get_settings

# Units
from datewise.units import (
    TZ,
    TZ_EUROPE_LONDON,
    TZ_UTC,
    TimeUnit,
    is_time_zone_supported,
    resolve_timezone,
)

# Now
from datewise.now import (
    Clock,
    FixedClock,
    SystemClock,
    current_time,
    now,
    now_local,
    today_local,
)

# Conversion
from datewise.convert import *  # noqa: F403
from datewise.convert import __all__ as _convert_all

# Calculations and comparisons
from datewise.arithmetic import *  # noqa: F403
from datewise.arithmetic import __all__ as _arithmetic_all

# Parsing and formatting
from datewise.format import *  # noqa: F403
from datewise.format import __all__ as _format_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Exceptions
    "DatewiseError",
    "ParseError",
    "UnresolvedZoneError",
    "UnsupportedEnvironmentError",
    # Configuration
    "Settings",
    "get_settings",
    # Units
    "TZ",
    "TZ_UTC",
    "TZ_EUROPE_LONDON",
    "TimeUnit",
    "is_time_zone_supported",
    "resolve_timezone",
    # Now
    "Clock",
    "FixedClock",
    "SystemClock",
    "now",
    "now_local",
    "today_local",
    "current_time",
    *_convert_all,
    *_arithmetic_all,
    *_format_all,
]
