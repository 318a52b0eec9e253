"""Internal utilities for Datewise.

This package contains implementation details that are not part of the
public API. Do not import from this package directly.
"""

from __future__ import annotations

__all__: list[str] = []
