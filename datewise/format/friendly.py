"""Human-friendly date and time formatting.

Friendly strings are built field by field from locale data, with the day
of month written as an ordinal:

    >>> format_friendly_plain_date(pendulum.Date(2024, 6, 12), "Europe/London")
    'Wednesday 12th June 2024'

    >>> format_plain_date_range(
    ...     pendulum.Date(2024, 6, 12),
    ...     pendulum.Date(2024, 6, 15),
    ...     DateRangeOptions(include_year=True),
    ... )
    '12th - 15th June 2024'

Every function takes an optional ``locale``; without one the configured
locale (see datewise.config) is used. A locale with no installed data
raises UnsupportedEnvironmentError when the function is called.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

import babel.dates
import pendulum

from datewise._internal.constants import RANGE_SEPARATOR
from datewise._internal.decorators import absent_passthrough
from datewise._internal.locale import require_cldr_locale, require_locale
from datewise.config import get_settings
from datewise.convert.zoned import instant_to_plain_date
from datewise.format._fields import (
    Width,
    date_parts,
    datetime_parts,
    join_parts,
    time_parts,
)
from datewise.format.iso8601 import parse_instant
from datewise.now import Clock, now_local
from datewise.units.timezone import TZ_UTC, resolve_timezone


@dataclass(frozen=True)
class FriendlyDateOptions:
    """Options for format_friendly_plain_date_short.

    Attributes:
        include_year: Append the year.
        exclude_weekday: Leave out the abbreviated weekday.
        short_month: Use the abbreviated month name ("Jun" for "June").
    """

    include_year: bool = False
    exclude_weekday: bool = False
    short_month: bool = False


@dataclass(frozen=True)
class DateRangeOptions:
    """Options for format_plain_date_range.

    Attributes:
        include_year: Show the year on the end date, and on the start date
            when the two years differ.
        month_format: "long" for "June", "short" for "Jun".
        locale: Locale for month names. Defaults to the configured locale.
    """

    include_year: bool = False
    month_format: Width = "long"
    locale: str | None = None

    def __post_init__(self) -> None:
        if self.month_format not in ("long", "short"):
            raise ValueError(
                f"month_format must be 'long' or 'short', got {self.month_format!r}"
            )


def _zoned(instant: datetime.datetime, tz: str) -> pendulum.DateTime:
    if instant.tzinfo is None:
        raise TypeError("instant must be timezone-aware, got a naive datetime")
    return pendulum.instance(instant).in_timezone(resolve_timezone(tz))


def _own_zone(value: datetime.datetime) -> pendulum.DateTime:
    if value.tzinfo is None:
        raise TypeError("zoned datetime must be timezone-aware")
    return pendulum.instance(value)


def _midnight(date: datetime.date, tz: str) -> pendulum.DateTime:
    zone = resolve_timezone(tz)
    return pendulum.datetime(date.year, date.month, date.day, tz=zone)


def _hour_cycle() -> str:
    return get_settings().hour_cycle


# Full friendly dates


def format_friendly_instant(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Format an instant as a long date and time in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
        UnsupportedEnvironmentError: If no locale data is available.

    Examples:
        >>> format_friendly_instant(parse_instant("2024-06-12T14:22:59Z"), "Europe/London")
        'Wednesday 12th June 2024 at 15:22'
    """
    moment = _zoned(instant, tz)
    parts = datetime_parts(moment, require_locale(locale), hour_cycle=_hour_cycle())
    return join_parts(parts)


def format_friendly_iso8601_datetime_str(
    s: str, tz: str, *, locale: str | None = None
) -> str:
    """Parse an ISO 8601 instant string and format it with format_friendly_instant."""
    return format_friendly_instant(parse_instant(s), tz, locale=locale)


def format_friendly_plain_date(
    date: datetime.date, tz: str, *, locale: str | None = None
) -> str:
    """Format a date as weekday, ordinal day, month and year.

    The date is rendered at its midnight in ``tz``.

    Examples:
        >>> format_friendly_plain_date(pendulum.Date(2024, 6, 12), "UTC")
        'Wednesday 12th June 2024'
    """
    parts = date_parts(_midnight(date, tz), require_locale(locale), weekday="long")
    return join_parts(parts)


def format_friendly_plain_date_short(
    date: datetime.date,
    options: FriendlyDateOptions | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Format a date compactly: "Wed 12th June" by default.

    Examples:
        >>> opts = FriendlyDateOptions(exclude_weekday=True, short_month=True)
        >>> format_friendly_plain_date_short(pendulum.Date(2024, 6, 12), opts)
        '12th Jun'
    """
    options = options or FriendlyDateOptions()
    parts = date_parts(
        _midnight(date, TZ_UTC),
        require_locale(locale),
        weekday=None if options.exclude_weekday else "short",
        month="short" if options.short_month else "long",
        year=options.include_year,
    )
    return join_parts(parts)


def format_friendly_datetime(
    value: datetime.datetime, *, locale: str | None = None
) -> str:
    """Format a zoned datetime as a long date and time in its own zone."""
    parts = datetime_parts(
        _own_zone(value), require_locale(locale), hour_cycle=_hour_cycle()
    )
    return join_parts(parts)


def format_instant_friendly_date(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Project an instant into ``tz`` and format it with format_friendly_datetime."""
    return format_friendly_datetime(_zoned(instant, tz), locale=locale)


def format_iso8601_to_friendly_date(
    s: str, tz: str, *, locale: str | None = None
) -> str:
    """Format the date of an ISO 8601 instant string, as seen in ``tz``.

    Examples:
        >>> format_iso8601_to_friendly_date("2024-06-12T14:22:59.123Z", "Europe/London")
        'Wednesday 12th June 2024'
    """
    date = instant_to_plain_date(parse_instant(s), tz)
    return format_friendly_plain_date(date, tz, locale=locale)


def format_iso8601_to_friendly_date_short(
    s: str,
    tz: str,
    options: FriendlyDateOptions | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Format the date of an ISO 8601 instant string compactly."""
    date = instant_to_plain_date(parse_instant(s), tz)
    return format_friendly_plain_date_short(date, options, locale=locale)


# Months and ranges


def format_plain_date_month(date: datetime.date, *, locale: str | None = None) -> str:
    """Return the full month name of ``date``, e.g. "June"."""
    return _midnight(date, TZ_UTC).format("MMMM", locale=require_locale(locale))


def format_plain_date_short_month(
    date: datetime.date, *, locale: str | None = None
) -> str:
    """Return the abbreviated month name of ``date``, e.g. "Jun"."""
    return _midnight(date, TZ_UTC).format("MMM", locale=require_locale(locale))


def format_plain_date_range(
    date1: datetime.date,
    date2: datetime.date,
    options: DateRangeOptions | None = None,
) -> str:
    """Format two dates as one range, leaving out what the start shares with the end.

    The start date drops its month when both dates fall in the same month
    number, and drops its year when both share a year. The end date always
    carries the month, and the year when ``include_year`` is set.

    Examples:
        >>> opts = DateRangeOptions(include_year=True)
        >>> format_plain_date_range(pendulum.Date(2024, 6, 12), pendulum.Date(2024, 7, 15), opts)
        '12th June - 15th July 2024'
        >>> format_plain_date_range(pendulum.Date(2024, 6, 12), pendulum.Date(2025, 7, 15), opts)
        '12th June 2024 - 15th July 2025'
    """
    options = options or DateRangeOptions()
    locale = require_locale(options.locale)
    start = date_parts(
        _midnight(date1, TZ_UTC),
        locale,
        month=None if date1.month == date2.month else options.month_format,
        year=options.include_year and date1.year != date2.year,
    )
    end = date_parts(
        _midnight(date2, TZ_UTC),
        locale,
        month=options.month_format,
        year=options.include_year,
    )
    return f"{join_parts(start)}{RANGE_SEPARATOR}{join_parts(end)}"


# Time of day


def format_instant_time(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Format the wall-clock time of an instant in ``tz``.

    Examples:
        >>> format_instant_time(parse_instant("2024-06-12T14:22:59.123Z"), "Europe/London")
        '15:22'
    """
    parts = time_parts(
        _zoned(instant, tz), require_locale(locale), hour_cycle=_hour_cycle()
    )
    return join_parts(parts)


def format_instant_time_with_seconds(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Format the wall-clock time of an instant in ``tz``, with seconds."""
    parts = time_parts(
        _zoned(instant, tz),
        require_locale(locale),
        hour_cycle=_hour_cycle(),
        seconds=True,
    )
    return join_parts(parts)


def format_instant_time_24h(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Format the wall-clock time of an instant in ``tz`` on a 24-hour clock."""
    parts = time_parts(_zoned(instant, tz), require_locale(locale), hour_cycle="h23")
    return join_parts(parts)


def format_instant_time_range(
    start: datetime.datetime,
    end: datetime.datetime,
    tz: str,
    *,
    locale: str | None = None,
) -> str:
    """Format two instants as a time range, e.g. "15:22 - 16:22"."""
    return RANGE_SEPARATOR.join(
        [
            format_instant_time(start, tz, locale=locale),
            format_instant_time(end, tz, locale=locale),
        ]
    )


def format_zoned_datetime_time(
    value: datetime.datetime, *, locale: str | None = None
) -> str:
    """Format the wall-clock time of a zoned datetime in its own zone."""
    parts = time_parts(
        _own_zone(value),
        require_locale(locale),
        hour_cycle=_hour_cycle(),
        two_digit_hour=False,
    )
    return join_parts(parts)


def format_iso8601_to_time(s: str, tz: str, *, locale: str | None = None) -> str:
    """Parse an ISO 8601 instant string and format its time in ``tz``."""
    return format_instant_time(parse_instant(s), tz, locale=locale)


@absent_passthrough
def format_optional_iso8601_to_time(
    s: str, tz: str, *, locale: str | None = None
) -> str:
    """Optional variant of format_iso8601_to_time."""
    return format_iso8601_to_time(s, tz, locale=locale)


@absent_passthrough
def format_optional_iso8601_to_time_with_seconds(
    s: str, tz: str, *, locale: str | None = None
) -> str:
    """Parse an ISO 8601 instant string, if present, and format its time with seconds."""
    return format_instant_time_with_seconds(parse_instant(s), tz, locale=locale)


@absent_passthrough
def format_optional_instant_time(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Optional variant of format_instant_time."""
    return format_instant_time(instant, tz, locale=locale)


@absent_passthrough
def format_optional_instant_time_with_seconds(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Optional variant of format_instant_time_with_seconds."""
    return format_instant_time_with_seconds(instant, tz, locale=locale)


@absent_passthrough
def format_optional_instant_time_24h(
    instant: datetime.datetime, tz: str, *, locale: str | None = None
) -> str:
    """Optional variant of format_instant_time_24h."""
    return format_instant_time_24h(instant, tz, locale=locale)


@absent_passthrough
def format_optional_zoned_datetime(
    value: datetime.datetime, *, locale: str | None = None
) -> str:
    """Format the time of a zoned datetime if present.

    Same output as format_optional_zoned_datetime_time.
    """
    return format_zoned_datetime_time(value, locale=locale)


@absent_passthrough
def format_optional_zoned_datetime_time(
    value: datetime.datetime, *, locale: str | None = None
) -> str:
    """Optional variant of format_zoned_datetime_time."""
    return format_zoned_datetime_time(value, locale=locale)


# Zone names


def format_friendly_timezone(
    tz: str, clock: Clock | None = None, *, locale: str | None = None
) -> str:
    """Return the long display name ``tz`` uses right now.

    The name follows daylight saving, so "Europe/London" gives "Greenwich
    Mean Time" in winter and "British Summer Time" in summer.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
        UnsupportedEnvironmentError: If no CLDR data is available.
    """
    moment = now_local(tz, clock)
    return babel.dates.get_timezone_name(
        moment, width="long", locale=require_cldr_locale(locale)
    )


__all__ = [
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
]
