"""Custom decorators for vardate.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import warnings
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


def deprecated(message: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Mark a function as deprecated with a warning message.

    This is a parameterized decorator that emits a DeprecationWarning
    when the decorated function is called.

    Args:
        message: The deprecation message explaining what to use instead.

    Returns:
        A decorator function.

    Examples:
        >>> @deprecated("Use has_start() instead")
        ... def has_start_date(self):
        ...     return self.has_start()
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(
                f"{func.__name__} is deprecated: {message}",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        wrapper._deprecated = True  # type: ignore[attr-defined]
        wrapper._deprecation_message = message  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = ["deprecated"]
