"""Projections of an instant onto a timezone's wall clock."""

from __future__ import annotations

import datetime

import pendulum

from datewise._internal.decorators import absent_passthrough
from datewise.units.timezone import resolve_timezone


def _in_zone(instant: datetime.datetime, tz: str) -> pendulum.DateTime:
    if instant.tzinfo is None:
        raise TypeError("instant must be timezone-aware, got a naive datetime")
    return pendulum.instance(instant).in_timezone(resolve_timezone(tz))


def instant_to_plain_date(instant: datetime.datetime, tz: str) -> pendulum.Date:
    """Return the calendar date of ``instant`` in ``tz``.

    Examples:
        >>> late = pendulum.datetime(2022, 5, 5, 22, 12, 13, tz="UTC")
        >>> instant_to_plain_date(late, "Europe/London")
        Date(2022, 5, 5)
        >>> instant_to_plain_date(late, "Europe/Paris")
        Date(2022, 5, 6)
    """
    return _in_zone(instant, tz).date()


@absent_passthrough
def instant_to_optional_plain_date(
    instant: datetime.datetime, tz: str
) -> pendulum.Date:
    """Optional variant of instant_to_plain_date."""
    return instant_to_plain_date(instant, tz)


def instant_to_plain_datetime(
    instant: datetime.datetime, tz: str
) -> pendulum.DateTime:
    """Return the wall-clock date and time of ``instant`` in ``tz``, naive."""
    return _in_zone(instant, tz).naive()


def instant_to_plain_time(instant: datetime.datetime, tz: str) -> pendulum.Time:
    """Return the wall-clock time of ``instant`` in ``tz``."""
    return _in_zone(instant, tz).time()


__all__ = [
    "instant_to_plain_date",
    "instant_to_optional_plain_date",
    "instant_to_plain_datetime",
    "instant_to_plain_time",
]
