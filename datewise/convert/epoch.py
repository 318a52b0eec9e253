"""Epoch conversion utilities.

This module converts between instants and Unix epoch milliseconds.

Functions:
    to_epoch_milliseconds: Convert an aware datetime to epoch milliseconds.
    from_epoch_milliseconds: Create an instant from epoch milliseconds.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from datewise.convert.epoch import from_epoch_milliseconds
    >>> from_epoch_milliseconds(0).year
    1970
"""

from __future__ import annotations

import datetime

import pendulum

from datewise._internal.constants import MICROS_PER_MILLISECOND

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_NAIVE_EPOCH = datetime.datetime(1970, 1, 1)
_ONE_MILLISECOND = datetime.timedelta(milliseconds=1)


def to_epoch_milliseconds(value: datetime.datetime) -> int:
    """Convert an aware datetime to milliseconds since the epoch.

    Sub-millisecond precision is floored, so an instant just before the
    epoch maps to -1 rather than 0.

    Args:
        value: An aware datetime (instant or zoned).

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z.

    Raises:
        TypeError: If ``value`` is naive.

    Examples:
        >>> to_epoch_milliseconds(pendulum.datetime(2024, 1, 15, tz="UTC"))
        1705276800000
    """
    if value.tzinfo is None:
        raise TypeError("cannot convert a naive datetime to epoch milliseconds")
    utc = value.astimezone(datetime.timezone.utc)
    wall = datetime.datetime(
        utc.year, utc.month, utc.day, utc.hour, utc.minute, utc.second, utc.microsecond
    )
    return (wall - _NAIVE_EPOCH) // _ONE_MILLISECOND


def from_epoch_milliseconds(milliseconds: int) -> pendulum.DateTime:
    """Create an instant from milliseconds since the epoch.

    Args:
        milliseconds: Milliseconds since 1970-01-01T00:00:00Z. May be negative.

    Returns:
        An aware datetime in UTC.

    Raises:
        TypeError: If ``milliseconds`` is not an integer.

    Examples:
        >>> from_epoch_milliseconds(1705276800123).microsecond
        123000
    """
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
        raise TypeError(
            f"epoch milliseconds must be an int, got {type(milliseconds).__name__}"
        )
    moment = EPOCH + datetime.timedelta(
        microseconds=milliseconds * MICROS_PER_MILLISECOND
    )
    return pendulum.instance(moment).in_timezone("UTC")


__all__ = [
    "EPOCH",
    "to_epoch_milliseconds",
    "from_epoch_milliseconds",
]
