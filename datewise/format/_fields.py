"""Field-by-field rendering for the friendly formatters.

A friendly string is assembled from typed parts (weekday, day, month,
year, hour, minute, ...) with literal separators between them. Each field
is rendered by the locale, then the parts are joined and only the
day-of-month part is rewritten as an ordinal ("12" becomes "12th").

Only the names are localized. The field order (weekday, day, month, year,
then " at " and the time) and the English ordinal suffix are the same for
every locale, so "de" gives "Mittwoch 12th Juni 2024".

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Literal, NamedTuple

import humanize
import pendulum
from pendulum.locales.locale import Locale

from datewise._internal.constants import (
    DATE_TIME_SEPARATOR,
    FIELD_SEPARATOR,
    TIME_SEPARATOR,
)

Width = Literal["long", "short"]

_WEEKDAY_TOKENS: dict[str, str] = {"long": "dddd", "short": "ddd"}
_MONTH_TOKENS: dict[str, str] = {"long": "MMMM", "short": "MMM"}


class Part(NamedTuple):
    """One rendered piece of a friendly string."""

    kind: str
    value: str


def _literal(text: str) -> Part:
    return Part("literal", text)


def date_parts(
    moment: pendulum.DateTime,
    locale: Locale,
    *,
    weekday: Width | None = None,
    month: Width | None = "long",
    year: bool = True,
) -> list[Part]:
    """Render the date fields of ``moment`` that are switched on.

    Fields always come out in weekday, day, month, year order.
    """
    fields: list[Part] = []
    if weekday is not None:
        fields.append(
            Part("weekday", moment.format(_WEEKDAY_TOKENS[weekday], locale=locale))
        )
    fields.append(Part("day", moment.format("D", locale=locale)))
    if month is not None:
        fields.append(
            Part("month", moment.format(_MONTH_TOKENS[month], locale=locale))
        )
    if year:
        fields.append(Part("year", moment.format("YYYY", locale=locale)))

    parts: list[Part] = []
    for field in fields:
        if parts:
            parts.append(_literal(FIELD_SEPARATOR))
        parts.append(field)
    return parts


def time_parts(
    moment: pendulum.DateTime,
    locale: Locale,
    *,
    hour_cycle: str = "h23",
    seconds: bool = False,
    two_digit_hour: bool = True,
) -> list[Part]:
    """Render the clock fields of ``moment``.

    With the "h12" cycle the hour runs 1-12 and a day period (AM/PM)
    follows the time.
    """
    if hour_cycle == "h12":
        hour_token = "hh" if two_digit_hour else "h"
    else:
        hour_token = "HH"
    parts = [
        Part("hour", moment.format(hour_token, locale=locale)),
        _literal(TIME_SEPARATOR),
        Part("minute", moment.format("mm", locale=locale)),
    ]
    if seconds:
        parts.append(_literal(TIME_SEPARATOR))
        parts.append(Part("second", moment.format("ss", locale=locale)))
    if hour_cycle == "h12":
        parts.append(_literal(FIELD_SEPARATOR))
        parts.append(Part("dayPeriod", moment.format("A", locale=locale)))
    return parts


def datetime_parts(
    moment: pendulum.DateTime,
    locale: Locale,
    *,
    weekday: Width | None = "long",
    hour_cycle: str = "h23",
) -> list[Part]:
    """Render a full date followed by " at " and the time."""
    return [
        *date_parts(moment, locale, weekday=weekday),
        _literal(DATE_TIME_SEPARATOR),
        *time_parts(moment, locale, hour_cycle=hour_cycle, two_digit_hour=False),
    ]


def join_parts(parts: list[Part]) -> str:
    """Join rendered parts, writing the day of month as an ordinal."""
    return "".join(
        humanize.ordinal(int(part.value)) if part.kind == "day" else part.value
        for part in parts
    )


__all__ = [
    "Part",
    "Width",
    "date_parts",
    "time_parts",
    "datetime_parts",
    "join_parts",
]
