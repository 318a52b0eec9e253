"""The current instant.

Every "current time" function takes an optional ``clock``. Without one the
host clock is read; tests pass a FixedClock instead, so nothing here holds
process-wide mutable state.

Examples:
    >>> import pendulum
    >>> clock = FixedClock(pendulum.datetime(2022, 7, 9, 20, 0, tz="UTC"))
    >>> today_local("Asia/Tokyo", clock=clock)
    Date(2022, 7, 10)
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pendulum

from datewise.units.timezone import TZ_UTC, resolve_timezone


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> pendulum.DateTime:
        """Return the current instant as an aware UTC datetime."""
        ...


class SystemClock:
    """Clock backed by the host's system time."""

    def now(self) -> pendulum.DateTime:
        return pendulum.now(TZ_UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock that always returns the same instant.

    Attributes:
        instant: The instant returned by now(). Any aware datetime is
            accepted and normalised to UTC.

    Raises:
        TypeError: If ``instant`` is naive.
    """

    instant: datetime.datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise TypeError("FixedClock requires an aware datetime")
        utc = pendulum.instance(self.instant).in_timezone(TZ_UTC)
        object.__setattr__(self, "instant", utc)

    def now(self) -> pendulum.DateTime:
        return self.instant


SYSTEM_CLOCK = SystemClock()


def _resolve_clock(clock: Clock | None) -> Clock:
    return SYSTEM_CLOCK if clock is None else clock


def now(clock: Clock | None = None) -> pendulum.DateTime:
    """Return the current instant.

    Args:
        clock: Clock to read. Defaults to the system clock.

    Returns:
        An aware datetime in UTC.
    """
    return _resolve_clock(clock).now().in_timezone(TZ_UTC)


def now_local(tz: str, clock: Clock | None = None) -> pendulum.DateTime:
    """Return the current instant as a zoned datetime in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return now(clock).in_timezone(resolve_timezone(tz))


def today_local(tz: str, clock: Clock | None = None) -> pendulum.Date:
    """Return today's calendar date in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return now_local(tz, clock).date()


def current_time(tz: str, clock: Clock | None = None) -> pendulum.Time:
    """Return the current wall-clock time in ``tz``.

    Raises:
        UnresolvedZoneError: If ``tz`` is unknown.
    """
    return now_local(tz, clock).time()


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
    "now",
    "now_local",
    "today_local",
    "current_time",
]
