"""Relative-time phrases ("in 9 seconds", "2 days ago").

The phrase uses the largest unit that describes the gap between now and
the instant as a non-zero whole number. Counts are truncated toward zero,
never floored, so 0.3 of an hour in the past is not "1 hour ago" and the
formatter moves on to minutes instead.

Examples:
    >>> import pendulum
    >>> from datewise.now import FixedClock
    >>> clock = FixedClock(pendulum.datetime(2022, 5, 5, 10, 12, 13, tz="UTC"))
    >>> format_relative_iso8601_datetime_str("2022-05-03T10:12:13Z", clock)
    '2 days ago'
    >>> format_relative_iso8601_datetime_str("2022-05-05T10:12:13Z", clock)
    'now'
"""

from __future__ import annotations

import datetime

import humanize
import pendulum
from pendulum.locales.locale import Locale

from datewise._internal.decorators import absent_passthrough
from datewise._internal.locale import require_relative_locale
from datewise.config import get_settings
from datewise.errors import UnsupportedEnvironmentError
from datewise.format.iso8601 import parse_instant
from datewise.now import Clock, now
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import TZ_UTC


def _phrase(locale: Locale, unit: TimeUnit, count: int) -> str:
    direction = "future" if count > 0 else "past"
    amount = abs(count)
    key = f"relative.{unit.value}.{direction}.{locale.plural(amount)}"
    template = locale.translation(key)
    if template is None:
        raise UnsupportedEnvironmentError(f"locale has no phrase for {key!r}")
    return template.format(amount)


def _now_phrase(name: str) -> str:
    try:
        humanize.i18n.activate(name.replace("-", "_"))
    except FileNotFoundError as exc:
        raise UnsupportedEnvironmentError(
            f"relative time formatting is not available for {name!r}"
        ) from exc
    try:
        return humanize.naturaltime(datetime.timedelta(0))
    finally:
        humanize.i18n.deactivate()


def format_relative_instant(
    instant: datetime.datetime,
    clock: Clock | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Describe an instant relative to now.

    Units are tried from years down to seconds. Years and months count
    calendar steps from now; weeks and smaller divide the exact gap.

    Args:
        instant: An aware datetime.
        clock: Clock that supplies "now". Defaults to the system clock.
        locale: Locale for the phrase. Defaults to the configured locale.

    Returns:
        A phrase such as "in 12 minutes", "4 months ago" or "now".

    Raises:
        TypeError: If ``instant`` is naive.
        UnsupportedEnvironmentError: If the locale has no relative-time data.
    """
    if instant.tzinfo is None:
        raise TypeError("instant must be timezone-aware, got a naive datetime")
    data = require_relative_locale(locale)
    target = pendulum.instance(instant).in_timezone(TZ_UTC)
    start = now(clock)
    for unit in TimeUnit:
        count = unit.total(start, target)
        if count != 0:
            return _phrase(data, unit, count)
    return _now_phrase(locale or get_settings().locale)


def format_relative_iso8601_datetime_str(
    s: str,
    clock: Clock | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Parse an ISO 8601 instant string and describe it relative to now.

    Raises:
        ParseError: If ``s`` is not an instant string.
    """
    return format_relative_instant(parse_instant(s), clock, locale=locale)


@absent_passthrough
def format_optional_relative_iso8601_datetime_str(
    s: str,
    clock: Clock | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Optional variant of format_relative_iso8601_datetime_str."""
    return format_relative_iso8601_datetime_str(s, clock, locale=locale)


__all__ = [
    "format_relative_instant",
    "format_relative_iso8601_datetime_str",
    "format_optional_relative_iso8601_datetime_str",
]
