"""ISO 8601 parsing and formatting.

This module turns ISO 8601 strings into pendulum values and back. Each
parser accepts exactly one kind of string, so a plain date string never
becomes a datetime and a plain datetime never picks up a zone.

Grammars:
    plain date:      YYYY-MM-DD
    plain time:      HH:MM[:SS[.f]]            (f is 1-9 digits)
    plain datetime:  YYYY-MM-DDTHH:MM[:SS[.f]]
    instant:         YYYY-MM-DDTHH:MM[:SS[.f]]OFFSET
    zoned datetime:  YYYY-MM-DDTHH:MM[:SS[.f]][OFFSET][Area/City]

OFFSET is Z, +HH:MM, +HHMM or +HH (or the same with -). The date and
time may be separated by T or a single space.

Fractions beyond microseconds are truncated.

Examples:
    >>> parse_plain_date("2024-06-12")
    Date(2024, 6, 12)

    >>> format_instant(parse_instant("2024-06-12T15:22:59.120+01:00"))
    '2024-06-12T14:22:59.12Z'
"""

from __future__ import annotations

import datetime
import re

import pendulum

from datewise._internal.decorators import absent_passthrough
from datewise.convert.epoch import from_epoch_milliseconds
from datewise.convert.legacy import to_plain_date
from datewise.errors import ParseError
from datewise.units.timezone import TZ_UTC, resolve_timezone

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_TIME = (
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?"
)
_OFFSET = r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)"

_PLAIN_DATE_RE = re.compile(_DATE)
_PLAIN_TIME_RE = re.compile(_TIME)
_PLAIN_DATETIME_RE = re.compile(rf"{_DATE}[Tt ]{_TIME}")
_INSTANT_RE = re.compile(rf"{_DATE}[Tt ]{_TIME}{_OFFSET}")
_ZONED_RE = re.compile(rf"{_DATE}[Tt ]{_TIME}{_OFFSET}?\[(?P<zone>[^\[\]]+)\]")


def _match(pattern: re.Pattern[str], s: str, kind: str) -> re.Match[str]:
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    match = pattern.fullmatch(s)
    if match is None:
        raise ParseError(f"Invalid ISO 8601 {kind}: {s!r}")
    return match


def _date_fields(match: re.Match[str]) -> tuple[int, int, int]:
    return int(match["year"]), int(match["month"]), int(match["day"])


def _time_fields(match: re.Match[str]) -> tuple[int, int, int, int]:
    fraction = match["fraction"] or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    return (
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
        microsecond,
    )


def _offset_timezone(offset: str) -> pendulum.FixedTimezone:
    if offset in ("Z", "z"):
        return pendulum.fixed_timezone(0)
    sign = -1 if offset[0] == "-" else 1
    digits = offset[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:] or 0)
    if hours > 23 or minutes > 59:
        raise ParseError(f"UTC offset out of range: {offset!r}")
    return pendulum.fixed_timezone(sign * (hours * 3600 + minutes * 60))


def parse_plain_date(s: str) -> pendulum.Date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ParseError: If the string is malformed or names no calendar day.

    Examples:
        >>> parse_plain_date("2024-02-30")
        Traceback (most recent call last):
        ...
        datewise.errors.ParseError: Invalid ISO 8601 plain date: '2024-02-30'
    """
    match = _match(_PLAIN_DATE_RE, s, "plain date")
    try:
        return pendulum.Date(*_date_fields(match))
    except ValueError as exc:
        raise ParseError(f"Invalid ISO 8601 plain date: {s!r}") from exc


def parse_plain_time(s: str) -> pendulum.Time:
    """Parse an ``HH:MM[:SS[.f]]`` string.

    Raises:
        ParseError: If the string is malformed or out of range.
    """
    match = _match(_PLAIN_TIME_RE, s, "plain time")
    try:
        return pendulum.Time(*_time_fields(match))
    except ValueError as exc:
        raise ParseError(f"Invalid ISO 8601 plain time: {s!r}") from exc


def parse_plain_datetime(s: str) -> pendulum.DateTime:
    """Parse a date-time string with no offset and no zone.

    Returns:
        A naive pendulum datetime.

    Raises:
        ParseError: If the string is malformed, out of range, or carries
            an offset or zone.
    """
    match = _match(_PLAIN_DATETIME_RE, s, "plain datetime")
    try:
        return pendulum.naive(*_date_fields(match), *_time_fields(match))
    except ValueError as exc:
        raise ParseError(f"Invalid ISO 8601 plain datetime: {s!r}") from exc


def parse_instant(s: str) -> pendulum.DateTime:
    """Parse a date-time string with a ``Z`` or UTC offset.

    Returns:
        An aware pendulum datetime in UTC.

    Raises:
        ParseError: If the string is malformed, out of range, or has no
            offset.

    Examples:
        >>> parse_instant("2022-05-05T10:12:13Z")
        DateTime(2022, 5, 5, 10, 12, 13, tzinfo=Timezone('UTC'))
    """
    match = _match(_INSTANT_RE, s, "instant")
    try:
        moment = pendulum.datetime(
            *_date_fields(match),
            *_time_fields(match),
            tz=_offset_timezone(match["offset"]),
        )
    except ValueError as exc:
        raise ParseError(f"Invalid ISO 8601 instant: {s!r}") from exc
    return moment.in_timezone(TZ_UTC)


def parse_zoned_datetime(s: str) -> pendulum.DateTime:
    """Parse a date-time string with a bracketed IANA zone.

    An explicit numeric offset must agree with the zone at that wall time.
    A ``Z`` offset pins the instant and the zone only sets the wall clock.

    Returns:
        An aware pendulum datetime in the bracketed zone.

    Raises:
        ParseError: If the string is malformed, out of range, or its offset
            contradicts its zone.
        UnresolvedZoneError: If the bracketed zone is unknown.

    Examples:
        >>> parse_zoned_datetime("2024-06-12T15:22:00+01:00[Europe/London]").hour
        15
    """
    match = _match(_ZONED_RE, s, "zoned datetime")
    zone = resolve_timezone(match["zone"])
    date_fields = _date_fields(match)
    time_fields = _time_fields(match)
    offset = match["offset"]
    try:
        if offset is None:
            return pendulum.datetime(*date_fields, *time_fields, tz=zone)
        moment = pendulum.datetime(
            *date_fields, *time_fields, tz=_offset_timezone(offset)
        ).in_timezone(zone)
    except ValueError as exc:
        raise ParseError(f"Invalid ISO 8601 zoned datetime: {s!r}") from exc
    if offset not in ("Z", "z") and moment.naive() != pendulum.naive(
        *date_fields, *time_fields
    ):
        raise ParseError(
            f"offset {offset} does not match timezone {match['zone']!r}: {s!r}"
        )
    return moment


def parse_instant_from_epoch_milliseconds(milliseconds: int) -> pendulum.DateTime:
    """Create an instant from Unix epoch milliseconds.

    Examples:
        >>> format_instant(parse_instant_from_epoch_milliseconds(1651745533000))
        '2022-05-05T10:12:13Z'
    """
    return from_epoch_milliseconds(milliseconds)


@absent_passthrough
def parse_optional_plain_date(s: str) -> pendulum.Date:
    """Parse a plain date, or return None for None or ""."""
    return parse_plain_date(s)


@absent_passthrough
def parse_optional_plain_time(s: str) -> pendulum.Time:
    """Parse a plain time, or return None for None or ""."""
    return parse_plain_time(s)


@absent_passthrough
def parse_optional_plain_datetime(s: str) -> pendulum.DateTime:
    """Parse a plain datetime, or return None for None or ""."""
    return parse_plain_datetime(s)


@absent_passthrough
def parse_optional_instant(s: str) -> pendulum.DateTime:
    """Parse an instant, or return None for None or ""."""
    return parse_instant(s)


@absent_passthrough
def parse_optional_zoned_datetime(s: str) -> pendulum.DateTime:
    """Parse a zoned datetime, or return None for None or ""."""
    return parse_zoned_datetime(s)


def _date_text(value: datetime.date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _minutes_text(value: datetime.time | datetime.datetime) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def format_plain_date(value: datetime.date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return _date_text(value)


def format_plain_datetime(value: datetime.datetime) -> str:
    """Format a plain datetime as ``YYYY-MM-DDTHH:MM``.

    Seconds and fractions are dropped, not rounded.

    Examples:
        >>> format_plain_datetime(pendulum.naive(2021, 12, 31, 23, 59, 59))
        '2021-12-31T23:59'
    """
    return f"{_date_text(value)}T{_minutes_text(value)}"


def format_plain_time(value: datetime.time) -> str:
    """Format a time as ``HH:MM``."""
    return _minutes_text(value)


def format_instant(value: datetime.datetime) -> str:
    """Format an instant as a UTC ISO 8601 string ending in ``Z``.

    Seconds are always present. The fraction uses as few digits as the
    value needs and is left out when zero.

    Raises:
        TypeError: If ``value`` is naive.

    Examples:
        >>> format_instant(pendulum.datetime(2021, 12, 31, 23, 59, 59, 123000, tz="UTC"))
        '2021-12-31T23:59:59.123Z'
    """
    if value.tzinfo is None:
        raise TypeError("instant must be timezone-aware, got a naive datetime")
    utc = value.astimezone(datetime.timezone.utc)
    text = f"{_date_text(utc)}T{_minutes_text(utc)}:{utc.second:02d}"
    if utc.microsecond:
        text += f".{utc.microsecond:06d}".rstrip("0")
    return f"{text}Z"


def format_datetime(d: datetime.datetime, tz: str) -> str:
    """Format the calendar date of a stdlib datetime in ``tz`` as ``YYYY-MM-DD``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return _date_text(to_plain_date(d, tz))


@absent_passthrough
def format_optional_plain_date(value: datetime.date) -> str:
    """Optional variant of format_plain_date."""
    return format_plain_date(value)


@absent_passthrough
def format_optional_plain_datetime(value: datetime.datetime) -> str:
    """Optional variant of format_plain_datetime."""
    return format_plain_datetime(value)


@absent_passthrough
def format_optional_plain_time(value: datetime.time) -> str:
    """Optional variant of format_plain_time."""
    return format_plain_time(value)


@absent_passthrough
def format_optional_instant(value: datetime.datetime) -> str:
    """Optional variant of format_instant."""
    return format_instant(value)


@absent_passthrough
def format_optional_datetime(d: datetime.datetime, tz: str) -> str:
    """Optional variant of format_datetime."""
    return format_datetime(d, tz)


__all__ = [
    # Parsing
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
    # Formatting
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
]
