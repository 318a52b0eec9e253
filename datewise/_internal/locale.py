"""Locale facility detection.

Friendly and relative formatting need calendar names and relative-time
phrases for a locale, which pendulum provides. Long timezone names come
from babel's CLDR data. Whether that data exists is checked on first use
and cached for the life of the process; a missing locale only fails the
call that needs it.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import re

import babel
from pendulum.locales.locale import Locale

from datewise._internal.decorators import memoize
from datewise.config import get_settings
from datewise.errors import UnsupportedEnvironmentError

logger = logging.getLogger(__name__)

_LANGUAGE_SPLIT = re.compile(r"[-_]")


def _candidates(name: str) -> list[str]:
    """Locale names to try for ``name``: itself, then its base language."""
    language = _LANGUAGE_SPLIT.split(name, maxsplit=1)[0]
    if language and language.lower() != name.lower():
        return [name, language]
    return [name]


@memoize
def detect_locale(name: str) -> Locale | None:
    """Load locale data for ``name``, falling back to its base language.

    "en-GB" is tried as-is first, then as "en". The result (including a
    miss) is cached per name.

    Args:
        name: A locale name such as "en", "en-GB" or "fr_FR".

    Returns:
        The loaded locale, or None if no data is installed for it.
    """
    for candidate in _candidates(name):
        try:
            locale = Locale.load(candidate)
        except ValueError:
            continue
        logger.debug("locale %r resolved to %r", name, candidate)
        return locale
    logger.warning("no locale data available for %r", name)
    return None


def require_locale(name: str | None = None) -> Locale:
    """Return calendar data for ``name`` or the configured locale.

    Raises:
        UnsupportedEnvironmentError: If no data is available for the locale.
    """
    name = name or get_settings().locale
    locale = detect_locale(name)
    if locale is None:
        raise UnsupportedEnvironmentError(
            f"locale formatting is not available for {name!r}"
        )
    return locale


def require_relative_locale(name: str | None = None) -> Locale:
    """Return a locale that also carries relative-time phrases.

    Raises:
        UnsupportedEnvironmentError: If the locale is missing, or has no
            relative-time data.
    """
    name = name or get_settings().locale
    locale = require_locale(name)
    if locale.translation("relative") is None:
        raise UnsupportedEnvironmentError(
            f"relative time formatting is not available for {name!r}"
        )
    return locale


@memoize
def detect_cldr_locale(name: str) -> babel.Locale | None:
    """Load CLDR data for ``name``, falling back to its base language.

    Used for display names pendulum's locale data does not carry, such as
    long timezone names. The result (including a miss) is cached per name.

    Args:
        name: A locale name such as "en", "en-GB" or "fr_FR".

    Returns:
        The babel locale, or None if CLDR has no data for it.
    """
    for candidate in _candidates(name):
        try:
            locale = babel.Locale.parse(candidate.replace("-", "_"))
        except (babel.UnknownLocaleError, ValueError):
            continue
        logger.debug("CLDR locale %r resolved to %r", name, candidate)
        return locale
    logger.warning("no CLDR data available for %r", name)
    return None


def require_cldr_locale(name: str | None = None) -> babel.Locale:
    """Return CLDR data for ``name`` or the configured locale.

    Raises:
        UnsupportedEnvironmentError: If CLDR has no data for the locale.
    """
    name = name or get_settings().locale
    locale = detect_cldr_locale(name)
    if locale is None:
        raise UnsupportedEnvironmentError(
            f"timezone names are not available for {name!r}"
        )
    return locale


__all__ = [
    "detect_locale",
    "require_locale",
    "require_relative_locale",
    "detect_cldr_locale",
    "require_cldr_locale",
]
