"""Conversions at the standard library ``datetime`` boundary.

Callers that still pass plain ``datetime.datetime`` objects cross into
Datewise values here, and get aware UTC ``datetime`` objects back out.

Naive ``datetime`` inputs are read as host-local time, the same way
``datetime.astimezone()`` reads them. Aware inputs keep their instant.

Examples:
    >>> import datetime
    >>> moment = datetime.datetime(2024, 3, 17, 15, tzinfo=datetime.timezone.utc)
    >>> to_plain_date(moment, "Europe/London")
    Date(2024, 3, 17)
"""

from __future__ import annotations

import datetime

import pendulum

from datewise._internal.decorators import absent_passthrough
from datewise.units.timezone import TZ_UTC, resolve_timezone


def _require_aware(value: datetime.datetime, what: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise TypeError(f"{what} must be timezone-aware, got a naive datetime")


def _utc_datetime(value: datetime.datetime) -> datetime.datetime:
    """Copy the wall fields of a UTC value into a stdlib datetime."""
    return datetime.datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
        tzinfo=datetime.timezone.utc,
    )


def to_datetime_utc(value: datetime.datetime) -> datetime.datetime:
    """Convert an instant or zoned datetime to a stdlib datetime in UTC.

    Args:
        value: An aware datetime.

    Returns:
        A ``datetime.datetime`` at the same instant with ``timezone.utc``.

    Raises:
        TypeError: If ``value`` is naive.
    """
    _require_aware(value, "value")
    return _utc_datetime(value.astimezone(datetime.timezone.utc))


@absent_passthrough
def to_optional_datetime_utc(value: datetime.datetime) -> datetime.datetime:
    """Optional variant of to_datetime_utc."""
    return to_datetime_utc(value)


def to_instant(d: datetime.datetime) -> pendulum.DateTime:
    """Convert a stdlib datetime to an instant.

    Args:
        d: A datetime. Naive values are read as host-local time.

    Returns:
        An aware pendulum datetime in UTC.
    """
    aware = d.astimezone() if d.tzinfo is None else d
    return pendulum.instance(aware).in_timezone(TZ_UTC)


@absent_passthrough
def to_optional_instant(d: datetime.datetime) -> pendulum.DateTime:
    """Optional variant of to_instant."""
    return to_instant(d)


def to_plain_date(d: datetime.datetime, tz: str) -> pendulum.Date:
    """Return the calendar date of a stdlib datetime as seen in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.

    Examples:
        >>> import datetime
        >>> late = datetime.datetime(2022, 5, 5, 22, 12, tzinfo=datetime.timezone.utc)
        >>> to_plain_date(late, "Europe/Paris")
        Date(2022, 5, 6)
    """
    return to_instant(d).in_timezone(resolve_timezone(tz)).date()


@absent_passthrough
def to_optional_plain_date(d: datetime.datetime, tz: str) -> pendulum.Date:
    """Optional variant of to_plain_date."""
    return to_plain_date(d, tz)


def to_zoned_datetime_utc(d: datetime.datetime) -> pendulum.DateTime:
    """Convert a stdlib datetime to a zoned datetime in the UTC zone."""
    return to_instant(d).in_timezone(resolve_timezone(TZ_UTC))


@absent_passthrough
def to_optional_zoned_datetime_utc(d: datetime.datetime) -> pendulum.DateTime:
    """Optional variant of to_zoned_datetime_utc."""
    return to_zoned_datetime_utc(d)


def plain_date_to_datetime(date: datetime.date, tz: str) -> datetime.datetime:
    """Return midnight of ``date`` in ``tz`` as a stdlib UTC datetime.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.

    Examples:
        >>> plain_date_to_datetime(pendulum.Date(2024, 6, 12), "Europe/London")
        datetime.datetime(2024, 6, 11, 23, 0, tzinfo=datetime.timezone.utc)
    """
    midnight = pendulum.datetime(
        date.year, date.month, date.day, tz=resolve_timezone(tz)
    )
    return to_datetime_utc(midnight)


@absent_passthrough
def plain_date_to_optional_datetime(
    date: datetime.date, tz: str
) -> datetime.datetime:
    """Optional variant of plain_date_to_datetime."""
    return plain_date_to_datetime(date, tz)


def plain_datetime_to_datetime(
    value: datetime.datetime, tz: str
) -> datetime.datetime:
    """Anchor a plain datetime to UTC and return it as a stdlib datetime.

    The wall fields are always read as UTC. ``tz`` is accepted for call-site
    symmetry with plain_date_to_datetime and is not used.

    Raises:
        TypeError: If ``value`` is aware.

    Examples:
        >>> plain_datetime_to_datetime(pendulum.naive(2024, 6, 12, 15, 22), "Europe/London")
        datetime.datetime(2024, 6, 12, 15, 22, tzinfo=datetime.timezone.utc)
    """
    if value.tzinfo is not None:
        raise TypeError("plain datetime must be naive, got an aware datetime")
    return _utc_datetime(value)


@absent_passthrough
def plain_datetime_to_optional_datetime(
    value: datetime.datetime, tz: str
) -> datetime.datetime:
    """Optional variant of plain_datetime_to_datetime."""
    return plain_datetime_to_datetime(value, tz)


__all__ = [
    "to_datetime_utc",
    "to_optional_datetime_utc",
    "to_instant",
    "to_optional_instant",
    "to_plain_date",
    "to_optional_plain_date",
    "to_zoned_datetime_utc",
    "to_optional_zoned_datetime_utc",
    "plain_date_to_datetime",
    "plain_date_to_optional_datetime",
    "plain_datetime_to_datetime",
    "plain_datetime_to_optional_datetime",
]
