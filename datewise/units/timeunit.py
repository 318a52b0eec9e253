"""TimeUnit enumeration for the relative-time cascade.

This module provides the TimeUnit enum for the calendar and clock units a
relative phrase can be expressed in, from years down to seconds.
"""

from __future__ import annotations

import math
from enum import Enum

import pendulum

from datewise._internal.constants import MONTHS_PER_YEAR


def _whole_months(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Count whole calendar months from ``start`` toward ``end``.

    The result is signed and truncated toward zero: stepping that many
    months from ``start`` never passes ``end``.
    """
    months = (end.year - start.year) * MONTHS_PER_YEAR + end.month - start.month
    if end >= start:
        while months > 0 and start.add(months=months) > end:
            months -= 1
    else:
        while months < 0 and start.add(months=months) < end:
            months += 1
    return months


class TimeUnit(Enum):
    """Units a relative phrase can use, in descending magnitude.

    Iterating the enum yields YEAR first and SECOND last, which is the
    order the relative formatter tries them in.

    Examples:
        >>> [unit.value for unit in TimeUnit][:3]
        ['year', 'month', 'week']

        >>> TimeUnit.DAY.plural
        'days'
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def plural(self) -> str:
        """Plural name of the unit, as used by locale relative-time keys."""
        return f"{self.value}s"

    def total(self, start: pendulum.DateTime, end: pendulum.DateTime) -> int:
        """Count whole units from ``start`` to ``end``, truncated toward zero.

        Years and months are measured on the calendar from ``start``: 30
        days after May 5th is 0.97 of a month, so it counts as 0 months.
        The clock units divide the exact elapsed time. Negative spans give
        negative counts, and -0.3 of a unit truncates to 0, not -1.

        Args:
            start: The reference point, usually "now".
            end: The value being described.

        Returns:
            The signed whole number of units between the two.
        """
        if self is TimeUnit.YEAR:
            return math.trunc(_whole_months(start, end) / MONTHS_PER_YEAR)
        if self is TimeUnit.MONTH:
            return _whole_months(start, end)
        span = pendulum.interval(start, end)
        totals = {
            TimeUnit.WEEK: span.total_weeks,
            TimeUnit.DAY: span.total_days,
            TimeUnit.HOUR: span.total_hours,
            TimeUnit.MINUTE: span.total_minutes,
            TimeUnit.SECOND: span.total_seconds,
        }
        return math.trunc(totals[self]())


__all__ = ["TimeUnit"]
