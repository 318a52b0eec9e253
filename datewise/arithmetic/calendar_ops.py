"""Calendar calculations on plain dates.

This module provides:
    - add_business_days: step forward over working days
    - start_of_day / end_of_day: the first and last moment of a date in a zone
    - start_of_week / end_of_week: ISO week boundaries (Monday to Sunday)
    - start_of_month / end_of_month: month boundaries

Week and month boundaries work on calendar fields only and take no zone.

Examples:
    >>> import pendulum
    >>> add_business_days(pendulum.Date(2022, 8, 5), 10)
    Date(2022, 8, 19)
    >>> start_of_week(pendulum.Date(2024, 6, 12))
    Date(2024, 6, 10)
"""

from __future__ import annotations

import datetime
from typing import Callable

import pendulum

from datewise._internal.constants import DAYS_PER_WEEK, END_OF_DAY, FRIDAY, MONDAY
from datewise.units.timezone import resolve_timezone

BusinessDayPredicate = Callable[[pendulum.Date], bool]

_ONE_DAY = datetime.timedelta(days=1)


def _as_date(date: datetime.date) -> pendulum.Date:
    if isinstance(date, datetime.datetime):
        raise TypeError("expected a plain date, got a datetime")
    return pendulum.Date(date.year, date.month, date.day)


def is_weekday(date: datetime.date) -> bool:
    """Return True for Monday through Friday."""
    return MONDAY <= date.isoweekday() <= FRIDAY


def add_business_days(
    date: datetime.date,
    n: int,
    is_business_day: BusinessDayPredicate | None = None,
) -> pendulum.Date:
    """Move forward ``n`` business days from ``date``.

    Each step advances at least one day and keeps going while the day is
    not a business day, so the start date itself is never counted.

    Args:
        date: The starting date.
        n: Number of business days to add. Zero or negative returns
            ``date`` unchanged.
        is_business_day: Predicate deciding which days count. Defaults to
            Monday through Friday.

    Returns:
        The date ``n`` business days after ``date``.

    Examples:
        >>> add_business_days(pendulum.Date(2024, 6, 14), 1)  # Friday
        Date(2024, 6, 17)
    """
    predicate = is_weekday if is_business_day is None else is_business_day
    current = _as_date(date)
    for _ in range(n):
        current = current + _ONE_DAY
        while not predicate(current):
            current = current + _ONE_DAY
    return current


def start_of_day(date: datetime.date, tz: str) -> pendulum.DateTime:
    """Return midnight of ``date`` in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return pendulum.datetime(date.year, date.month, date.day, tz=resolve_timezone(tz))


def end_of_day(date: datetime.date, tz: str) -> pendulum.DateTime:
    """Return the last representable moment of ``date`` in ``tz``.

    That is 23:59:59.999999, one microsecond before the next midnight.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return pendulum.datetime(
        date.year, date.month, date.day, *END_OF_DAY, tz=resolve_timezone(tz)
    )


def start_of_week(date: datetime.date) -> pendulum.Date:
    """Return the Monday of the ISO week containing ``date``."""
    current = _as_date(date)
    return current - datetime.timedelta(days=current.isoweekday() - 1)


def end_of_week(date: datetime.date) -> pendulum.Date:
    """Return the Sunday of the ISO week containing ``date``."""
    current = _as_date(date)
    return current + datetime.timedelta(days=DAYS_PER_WEEK - current.isoweekday())


def start_of_month(date: datetime.date) -> pendulum.Date:
    """Return the first day of the month containing ``date``."""
    current = _as_date(date)
    return current - datetime.timedelta(days=current.day - 1)


def end_of_month(date: datetime.date) -> pendulum.Date:
    """Return the last day of the month containing ``date``.

    Examples:
        >>> end_of_month(pendulum.Date(2024, 2, 10))
        Date(2024, 2, 29)
    """
    current = _as_date(date)
    return current + datetime.timedelta(days=current.days_in_month - current.day)


__all__ = [
    "BusinessDayPredicate",
    "is_weekday",
    "add_business_days",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
]
