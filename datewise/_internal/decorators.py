"""Function decorators shared across Datewise.

This module provides:
    - @absent_passthrough: build the "optional" variant of a function
    - @memoize: process-wide cache for capability checks

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Concatenate, ParamSpec, TypeVar

P = ParamSpec("P")
A = TypeVar("A")
T = TypeVar("T")


def is_absent(value: Any) -> bool:
    """Return True for the inputs the optional family treats as missing.

    Only None and the empty string are absent. Anything else, including
    whitespace or a malformed string, is handed to the wrapped function.
    """
    return value is None or (isinstance(value, str) and value == "")


def absent_passthrough(
    func: Callable[Concatenate[A, P], T],
) -> Callable[Concatenate[A | None, P], T | None]:
    """Derive the optional variant of a single-value function.

    The wrapper returns None when its first argument is absent (None or
    ""), and otherwise calls ``func`` with all arguments unchanged, so a
    malformed value still raises.

    Args:
        func: A function whose first positional argument is the value.

    Returns:
        The absent-in, absent-out variant of ``func``.

    Examples:
        >>> parse_optional_plain_date = absent_passthrough(parse_plain_date)
        >>> parse_optional_plain_date(None) is None
        True
        >>> parse_optional_plain_date("2024-06-12")
        Date(2024, 6, 12)
    """

    @functools.wraps(func)
    def wrapper(value: A | None, /, *args: P.args, **kwargs: P.kwargs) -> T | None:
        if is_absent(value):
            return None
        return func(value, *args, **kwargs)  # type: ignore[arg-type]

    return wrapper


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Cache a function's results for the lifetime of the process.

    Used for checks that should run once, such as detecting whether a
    locale's data is installed. Arguments must be hashable. The cache can
    be dropped with ``func.cache_clear()``.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.
    """
    cache: dict[tuple[Any, ...], T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "is_absent",
    "absent_passthrough",
    "memoize",
]
