"""Conversion utilities for Datewise.

This module provides functions for moving values between representations:
stdlib ``datetime`` objects, instants, zoned datetimes, plain dates and
times, and Unix epoch milliseconds.

Examples:
    >>> from datewise.convert import from_epoch_milliseconds, to_epoch_milliseconds
    >>> to_epoch_milliseconds(from_epoch_milliseconds(1705276800123))
    1705276800123
"""

from __future__ import annotations

from datewise.convert.epoch import from_epoch_milliseconds, to_epoch_milliseconds
from datewise.convert.legacy import (
    plain_date_to_datetime,
    plain_date_to_optional_datetime,
    plain_datetime_to_datetime,
    plain_datetime_to_optional_datetime,
    to_datetime_utc,
    to_instant,
    to_optional_datetime_utc,
    to_optional_instant,
    to_optional_plain_date,
    to_optional_zoned_datetime_utc,
    to_plain_date,
    to_zoned_datetime_utc,
)
from datewise.convert.zoned import (
    instant_to_optional_plain_date,
    instant_to_plain_date,
    instant_to_plain_datetime,
    instant_to_plain_time,
)

__all__ = [
    # Epoch
    "to_epoch_milliseconds",
    "from_epoch_milliseconds",
    # stdlib datetime boundary
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
    # Zone projections
    "instant_to_plain_date",
    "instant_to_optional_plain_date",
    "instant_to_plain_datetime",
    "instant_to_plain_time",
]
