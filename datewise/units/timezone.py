"""IANA timezone identifiers.

This module names the zones Datewise callers use most often and resolves
zone identifiers against the host's timezone database.

Zone rules (offsets, DST transitions) are not modelled here: a zone is
always looked up by name through pendulum, which reads the IANA database.
"""

from __future__ import annotations

import logging
from enum import Enum

import pendulum
from pendulum.tz.timezone import FixedTimezone, Timezone

from datewise.errors import UnresolvedZoneError

logger = logging.getLogger(__name__)


class TZ(str, Enum):
    """Commonly used IANA timezone identifiers.

    Members are plain strings, so ``TZ.EUROPE_LONDON`` can be passed
    anywhere a zone name is expected.

    Examples:
        >>> TZ.EUROPE_LONDON == "Europe/London"
        True
    """

    UTC = "UTC"
    # Europe
    EUROPE_LONDON = "Europe/London"
    EUROPE_DUBLIN = "Europe/Dublin"
    EUROPE_LISBON = "Europe/Lisbon"
    EUROPE_PARIS = "Europe/Paris"
    EUROPE_BERLIN = "Europe/Berlin"
    EUROPE_MADRID = "Europe/Madrid"
    EUROPE_ROME = "Europe/Rome"
    EUROPE_AMSTERDAM = "Europe/Amsterdam"
    EUROPE_BRUSSELS = "Europe/Brussels"
    EUROPE_ZURICH = "Europe/Zurich"
    EUROPE_STOCKHOLM = "Europe/Stockholm"
    EUROPE_WARSAW = "Europe/Warsaw"
    EUROPE_ATHENS = "Europe/Athens"
    EUROPE_HELSINKI = "Europe/Helsinki"
    EUROPE_ISTANBUL = "Europe/Istanbul"
    # Americas
    AMERICA_NEW_YORK = "America/New_York"
    AMERICA_CHICAGO = "America/Chicago"
    AMERICA_DENVER = "America/Denver"
    AMERICA_PHOENIX = "America/Phoenix"
    AMERICA_LOS_ANGELES = "America/Los_Angeles"
    AMERICA_ANCHORAGE = "America/Anchorage"
    AMERICA_HALIFAX = "America/Halifax"
    AMERICA_TORONTO = "America/Toronto"
    AMERICA_VANCOUVER = "America/Vancouver"
    AMERICA_MEXICO_CITY = "America/Mexico_City"
    AMERICA_SAO_PAULO = "America/Sao_Paulo"
    AMERICA_BUENOS_AIRES = "America/Argentina/Buenos_Aires"
    PACIFIC_HONOLULU = "Pacific/Honolulu"
    # Africa and Middle East
    AFRICA_CAIRO = "Africa/Cairo"
    AFRICA_JOHANNESBURG = "Africa/Johannesburg"
    AFRICA_LAGOS = "Africa/Lagos"
    AFRICA_NAIROBI = "Africa/Nairobi"
    ASIA_DUBAI = "Asia/Dubai"
    # Asia and Oceania
    ASIA_KOLKATA = "Asia/Kolkata"
    ASIA_SINGAPORE = "Asia/Singapore"
    ASIA_HONG_KONG = "Asia/Hong_Kong"
    ASIA_SHANGHAI = "Asia/Shanghai"
    ASIA_TOKYO = "Asia/Tokyo"
    ASIA_SEOUL = "Asia/Seoul"
    AUSTRALIA_PERTH = "Australia/Perth"
    AUSTRALIA_SYDNEY = "Australia/Sydney"
    PACIFIC_AUCKLAND = "Pacific/Auckland"

    def __str__(self) -> str:
        return self.value


TZ_UTC: str = TZ.UTC.value
TZ_EUROPE_LONDON: str = TZ.EUROPE_LONDON.value


def resolve_timezone(name: str) -> Timezone | FixedTimezone:
    """Resolve a zone identifier against the host's timezone database.

    Args:
        name: An IANA zone identifier such as "Europe/London".

    Returns:
        The pendulum timezone for ``name``.

    Raises:
        UnresolvedZoneError: If the database has no zone with that name.

    Examples:
        >>> resolve_timezone("Europe/London").name
        'Europe/London'
    """
    key = name.value if isinstance(name, TZ) else name
    if not isinstance(key, str) or not key:
        raise UnresolvedZoneError(str(key))
    try:
        return pendulum.timezone(key)
    except (ValueError, KeyError) as exc:
        # zoneinfo reports unknown keys as KeyError, malformed keys as ValueError
        logger.debug("timezone lookup failed for %r: %s", key, exc)
        raise UnresolvedZoneError(key) from exc


def is_time_zone_supported(name: str) -> bool:
    """Check whether a zone identifier resolves on this host.

    Args:
        name: An IANA zone identifier.

    Returns:
        True if the zone can be resolved, False otherwise.

    Examples:
        >>> is_time_zone_supported("Europe/London")
        True
        >>> is_time_zone_supported("Mars/Olympus_Mons")
        False
    """
    try:
        resolve_timezone(name)
    except UnresolvedZoneError:
        return False
    return True


__all__ = [
    "TZ",
    "TZ_UTC",
    "TZ_EUROPE_LONDON",
    "resolve_timezone",
    "is_time_zone_supported",
]
