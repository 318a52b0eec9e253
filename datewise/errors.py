"""Datewise exception hierarchy.

All Datewise-specific exceptions inherit from DatewiseError.
"""

from __future__ import annotations


class DatewiseError(Exception):
    """Base exception for all Datewise errors."""

    pass


class ParseError(DatewiseError):
    """Failed to parse string representation.

    Raised when a string does not match the ISO 8601 grammar expected
    for the requested value kind, or when its fields are out of range.

    Examples:
        - "invalid-date" given to parse_plain_date
        - "2024-02-30" (no such calendar day)
        - an instant string without "Z" or a UTC offset
    """

    pass


class UnresolvedZoneError(DatewiseError):
    """Unknown timezone identifier.

    Raised whenever a zone name cannot be found in the host's
    timezone database.

    Examples:
        - "Mars/Olympus_Mons"
        - an empty zone name
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown timezone identifier: {name!r}")
        self.name = name


class UnsupportedEnvironmentError(DatewiseError):
    """A locale facility needed for formatting is unavailable.

    Raised at call time by the friendly and relative formatters when the
    requested locale (and its base language) has no calendar or
    relative-time data in this environment.
    """

    pass


__all__ = [
    "DatewiseError",
    "ParseError",
    "UnresolvedZoneError",
    "UnsupportedEnvironmentError",
]
