"""Half-open interval helpers.

An interval here is anything with ``start`` and ``end`` attributes holding
aware datetimes. It includes its start and excludes its end, so two
intervals that only touch do not overlap.
"""

from __future__ import annotations

import datetime
from typing import NamedTuple, Protocol

from datewise.arithmetic.comparisons import is_instant_before


class Bounded(Protocol):
    """Structural type for a start/end pair."""

    @property
    def start(self) -> datetime.datetime: ...

    @property
    def end(self) -> datetime.datetime: ...


class Interval(NamedTuple):
    """A half-open span of time ``[start, end)``."""

    start: datetime.datetime
    end: datetime.datetime


def are_intervals_overlapping(first: Bounded, second: Bounded) -> bool:
    """Test whether two half-open intervals share any instant.

    Args:
        first: An object with ``start`` and ``end`` instants.
        second: Another such object, for example a ``pendulum.Interval``.

    Returns:
        True if each interval starts strictly before the other ends.

    Examples:
        >>> import pendulum
        >>> a = Interval(pendulum.datetime(2024, 1, 1), pendulum.datetime(2024, 1, 2))
        >>> b = Interval(pendulum.datetime(2024, 1, 2), pendulum.datetime(2024, 1, 3))
        >>> are_intervals_overlapping(a, b)
        False
    """
    return is_instant_before(first.start, second.end) and is_instant_before(
        second.start, first.end
    )


__all__ = [
    "Bounded",
    "Interval",
    "are_intervals_overlapping",
]
