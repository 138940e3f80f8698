"""Custom decorators for timevalue.

This module provides decorator utilities for the library:
    - @hybridmethod: a method that binds to the instance when called on
      one, and to the class when called on the class

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import types
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class hybridmethod(Generic[T]):
    """Bind the wrapped function to an instance or to its class.

    The function receives whichever it was looked up on as its first
    argument, so one name can serve both as an instance method and as a
    class-level shortcut.

    Examples:
        >>> class Clock:
        ...     @hybridmethod
        ...     def describe(self_or_cls):
        ...         return "class" if isinstance(self_or_cls, type) else "instance"
        >>> Clock.describe()
        'class'
        >>> Clock().describe()
        'instance'
    """

    def __init__(self, func: Callable[..., T]) -> None:
        self.__func__ = func
        functools.update_wrapper(self, func)  # type: ignore[arg-type]

    def __get__(self, instance: Any, owner: type | None = None) -> Callable[..., T]:
        target = owner if instance is None else instance
        return types.MethodType(self.__func__, target)


__all__ = [
    "hybridmethod",
]
