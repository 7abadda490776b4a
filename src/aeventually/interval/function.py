r"""Interval strategy backed by a plain function."""

from __future__ import annotations

__all__ = ["FunctionInterval"]

from typing import TYPE_CHECKING

from aeventually.interval.base import BaseInterval

if TYPE_CHECKING:
    from collections.abc import Callable


class FunctionInterval(BaseInterval):
    """Adapt a callable ``(attempt) -> delay`` to the interval interface.

    Plain callables passed as ``interval`` to the configuration are wrapped
    in this class.

    Args:
        func: Function receiving the 1-indexed attempt count and returning
            the delay in seconds.

    Example:
        ```pycon
        >>> from aeventually.interval import FunctionInterval
        >>> interval = FunctionInterval(lambda attempt: attempt / 10)
        >>> interval.next(3)
        0.3

        ```
    """

    def __init__(self, func: Callable[[int], float]) -> None:
        if not callable(func):
            msg = f"func must be callable, got {func!r}"
            raise TypeError(msg)
        self.func = func

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{self.__class__.__qualname__}(func={name})"

    def next(self, attempt: int) -> float:
        delay = self.func(attempt)
        if delay < 0:
            msg = f"interval function returned a negative delay: {delay}"
            raise ValueError(msg)
        return delay
