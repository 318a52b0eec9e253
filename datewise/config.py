"""Process-level settings for Datewise.

Settings only hold presentation defaults. Timezones are never configured
here: every function that needs one takes it as an explicit argument.

Environment variables:
    DATEWISE_LOCALE: Locale for friendly and relative formatting (default "en").
    DATEWISE_HOUR_CYCLE: "h23" or "h12" for time-of-day rendering (default "h23").

Examples:
    >>> from datewise.config import Settings
    >>> Settings.from_env({"DATEWISE_LOCALE": "fr"}).locale
    'fr'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from datewise._internal.constants import (
    DEFAULT_HOUR_CYCLE,
    DEFAULT_LOCALE,
    ENV_HOUR_CYCLE,
    ENV_LOCALE,
    HOUR_CYCLES,
)
from datewise._internal.decorators import memoize


@dataclass(frozen=True)
class Settings:
    """Presentation defaults used when a caller does not pass its own.

    Attributes:
        locale: Locale name for month/weekday names and relative phrases.
        hour_cycle: "h23" renders 15:22, "h12" renders 3:22 PM.
    """

    locale: str = DEFAULT_LOCALE
    hour_cycle: str = DEFAULT_HOUR_CYCLE

    def __post_init__(self) -> None:
        if self.hour_cycle not in HOUR_CYCLES:
            raise ValueError(
                f"hour_cycle must be one of {HOUR_CYCLES}, got {self.hour_cycle!r}"
            )
        if not self.locale:
            raise ValueError("locale must not be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings with unset variables left at their defaults.

        Raises:
            ValueError: If a variable holds an unsupported value.
        """
        env = os.environ if environ is None else environ
        return cls(
            locale=env.get(ENV_LOCALE) or DEFAULT_LOCALE,
            hour_cycle=env.get(ENV_HOUR_CYCLE) or DEFAULT_HOUR_CYCLE,
        )


@memoize
def get_settings() -> Settings:
    """Return the settings for this process, read once from the environment."""
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
