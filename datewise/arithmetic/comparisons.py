"""Named comparison predicates for temporal values.

Each predicate answers one question about two values of the same kind.

Comparison Rules:
    - Dates and times: chronological ordering of calendar/clock fields
    - Instants: compared on the timeline, whatever zone each carries
    - Durations: compared by total length, so 1 hour equals 60 minutes
    - Optional equality: two absent values are equal, one absent is not

The day predicates (is_today, is_tomorrow, is_yesterday) read today's
date in a caller-supplied zone from the clock.
"""

from __future__ import annotations

import datetime

from datewise.now import Clock, today_local

_ONE_DAY = datetime.timedelta(days=1)


def _require_aware(*values: datetime.datetime) -> None:
    for value in values:
        if value.tzinfo is None:
            raise TypeError("instants must be timezone-aware, got a naive datetime")


# Relative to today


def is_today(date: datetime.date, tz: str, clock: Clock | None = None) -> bool:
    """Test whether ``date`` is today's date in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return date == today_local(tz, clock)


def is_tomorrow(date: datetime.date, tz: str, clock: Clock | None = None) -> bool:
    """Test whether ``date`` is tomorrow in ``tz``.

    True when the day before ``date`` is today.
    """
    return is_today(date - _ONE_DAY, tz, clock)


def is_yesterday(date: datetime.date, tz: str, clock: Clock | None = None) -> bool:
    """Test whether ``date`` is yesterday in ``tz``.

    True when the day after ``date`` is today.
    """
    return is_today(date + _ONE_DAY, tz, clock)


# Plain dates


def is_date_equal(date: datetime.date, compared_with: datetime.date) -> bool:
    return date == compared_with


def is_date_after(date: datetime.date, compared_with: datetime.date) -> bool:
    return date > compared_with


def is_date_before(date: datetime.date, compared_with: datetime.date) -> bool:
    return date < compared_with


def is_optional_date_equal(
    date: datetime.date | None, compared_with: datetime.date | None
) -> bool:
    """Test equality where either date may be None.

    Examples:
        >>> is_optional_date_equal(None, None)
        True
    """
    if date is None or compared_with is None:
        return date is None and compared_with is None
    return is_date_equal(date, compared_with)


# Plain times


def is_time_equal(time: datetime.time, compared_with: datetime.time) -> bool:
    return time == compared_with


def is_time_after(time: datetime.time, compared_with: datetime.time) -> bool:
    return time > compared_with


def is_time_before(time: datetime.time, compared_with: datetime.time) -> bool:
    return time < compared_with


# Instants


def is_instant_equal(
    instant: datetime.datetime, compared_with: datetime.datetime
) -> bool:
    """Test whether two aware datetimes are the same point in time.

    Raises:
        TypeError: If either value is naive.
    """
    _require_aware(instant, compared_with)
    return instant == compared_with


def is_instant_after(
    instant: datetime.datetime, compared_with: datetime.datetime
) -> bool:
    _require_aware(instant, compared_with)
    return instant > compared_with


def is_instant_before(
    instant: datetime.datetime, compared_with: datetime.datetime
) -> bool:
    _require_aware(instant, compared_with)
    return instant < compared_with


def is_optional_instant_equal(
    instant: datetime.datetime | None, compared_with: datetime.datetime | None
) -> bool:
    """Test instant equality where either value may be None."""
    if instant is None or compared_with is None:
        return instant is None and compared_with is None
    return is_instant_equal(instant, compared_with)


# Durations


def is_duration_equal(
    duration: datetime.timedelta, compared_with: datetime.timedelta
) -> bool:
    """Test whether two durations have the same total length.

    Examples:
        >>> import pendulum
        >>> is_duration_equal(pendulum.duration(hours=1), pendulum.duration(minutes=60))
        True
    """
    return duration.total_seconds() == compared_with.total_seconds()


def is_duration_greater(
    duration: datetime.timedelta, compared_with: datetime.timedelta
) -> bool:
    return duration.total_seconds() > compared_with.total_seconds()


def is_duration_less(
    duration: datetime.timedelta, compared_with: datetime.timedelta
) -> bool:
    return duration.total_seconds() < compared_with.total_seconds()


__all__ = [
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "is_date_equal",
    "is_date_after",
    "is_date_before",
    "is_optional_date_equal",
    "is_time_equal",
    "is_time_after",
    "is_time_before",
    "is_instant_equal",
    "is_instant_after",
    "is_instant_before",
    "is_optional_instant_equal",
    "is_duration_equal",
    "is_duration_greater",
    "is_duration_less",
]
