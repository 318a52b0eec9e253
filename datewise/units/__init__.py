"""Units and identifiers for Datewise.

This module exports:
    - TZ: Common IANA timezone identifiers
    - TimeUnit: Units used by relative-time phrases
"""

from __future__ import annotations

from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import (
    TZ,
    TZ_EUROPE_LONDON,
    TZ_UTC,
    is_time_zone_supported,
    resolve_timezone,
)

__all__ = [
    "TZ",
    "TZ_UTC",
    "TZ_EUROPE_LONDON",
    "TimeUnit",
    "is_time_zone_supported",
    "resolve_timezone",
]
