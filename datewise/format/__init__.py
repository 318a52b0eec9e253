"""Parsing and formatting for Datewise.

This module exports:
    - ISO 8601 parsers and fixed-pattern formatters (iso8601)
    - Friendly long-form, time-of-day and range formatters (friendly)
    - Relative-time phrases (relative)

Examples:
    >>> from datewise.format import format_plain_date, parse_plain_date
    >>> format_plain_date(parse_plain_date("2024-06-12"))
    '2024-06-12'
"""

from __future__ import annotations

from datewise.format.friendly import (
    DateRangeOptions,
    FriendlyDateOptions,
    format_friendly_datetime,
    format_friendly_instant,
    format_friendly_iso8601_datetime_str,
    format_friendly_plain_date,
    format_friendly_plain_date_short,
    format_friendly_timezone,
    format_instant_friendly_date,
    format_instant_time,
    format_instant_time_24h,
    format_instant_time_range,
    format_instant_time_with_seconds,
    format_iso8601_to_friendly_date,
    format_iso8601_to_friendly_date_short,
    format_iso8601_to_time,
    format_optional_instant_time,
    format_optional_instant_time_24h,
    format_optional_instant_time_with_seconds,
    format_optional_iso8601_to_time,
    format_optional_iso8601_to_time_with_seconds,
    format_optional_zoned_datetime,
    format_optional_zoned_datetime_time,
    format_plain_date_month,
    format_plain_date_range,
    format_plain_date_short_month,
    format_zoned_datetime_time,
)
from datewise.format.iso8601 import (
    format_datetime,
    format_instant,
    format_optional_datetime,
    format_optional_instant,
    format_optional_plain_date,
    format_optional_plain_datetime,
    format_optional_plain_time,
    format_plain_date,
    format_plain_datetime,
    format_plain_time,
    parse_instant,
    parse_instant_from_epoch_milliseconds,
    parse_optional_instant,
    parse_optional_plain_date,
    parse_optional_plain_datetime,
    parse_optional_plain_time,
    parse_optional_zoned_datetime,
    parse_plain_date,
    parse_plain_datetime,
    parse_plain_time,
    parse_zoned_datetime,
)
from datewise.format.relative import (
    format_optional_relative_iso8601_datetime_str,
    format_relative_instant,
    format_relative_iso8601_datetime_str,
)

__all__ = [
    # ISO 8601 parsing
    "parse_plain_date",
    "parse_plain_time",
    "parse_plain_datetime",
    "parse_instant",
    "parse_zoned_datetime",
    "parse_instant_from_epoch_milliseconds",
    "parse_optional_plain_date",
    "parse_optional_plain_time",
    "parse_optional_plain_datetime",
    "parse_optional_instant",
    "parse_optional_zoned_datetime",
    # ISO 8601 formatting
    "format_plain_date",
    "format_plain_datetime",
    "format_plain_time",
    "format_instant",
    "format_datetime",
    "format_optional_plain_date",
    "format_optional_plain_datetime",
    "format_optional_plain_time",
    "format_optional_instant",
    "format_optional_datetime",
    # Friendly
    "FriendlyDateOptions",
    "DateRangeOptions",
    "format_friendly_instant",
    "format_friendly_iso8601_datetime_str",
    "format_friendly_plain_date",
    "format_friendly_plain_date_short",
    "format_friendly_datetime",
    "format_instant_friendly_date",
    "format_iso8601_to_friendly_date",
    "format_iso8601_to_friendly_date_short",
    "format_plain_date_month",
    "format_plain_date_short_month",
    "format_plain_date_range",
    "format_instant_time",
    "format_instant_time_with_seconds",
    "format_instant_time_24h",
    "format_instant_time_range",
    "format_zoned_datetime_time",
    "format_iso8601_to_time",
    "format_optional_iso8601_to_time",
    "format_optional_iso8601_to_time_with_seconds",
    "format_optional_instant_time",
    "format_optional_instant_time_with_seconds",
    "format_optional_instant_time_24h",
    "format_optional_zoned_datetime",
    "format_optional_zoned_datetime_time",
    "format_friendly_timezone",
    # Relative
    "format_relative_instant",
    "format_relative_iso8601_datetime_str",
    "format_optional_relative_iso8601_datetime_str",
]
