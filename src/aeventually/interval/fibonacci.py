r"""Fibonacci interval strategy."""

from __future__ import annotations

__all__ = ["FibonacciInterval"]

from aeventually.interval.base import BaseInterval
from aeventually.interval.fixed import DEFAULT_INTERVAL


class FibonacciInterval(BaseInterval):
    """Fibonacci interval strategy.

    Calculates delay as: base_delay * fibonacci(attempt + offset), with
    optional max_delay cap.

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) ramps up more
    gradually than exponential growth. ``offset`` skips the first terms of
    the sequence, which is useful to start with a longer delay.

    Args:
        base_delay: The base delay in seconds (default: 0.025).
        offset: Number of Fibonacci terms to skip (default: 0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aeventually.interval import FibonacciInterval
        >>> interval = FibonacciInterval(base_delay=1.0)
        >>> [interval.next(attempt) for attempt in range(1, 7)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> FibonacciInterval(base_delay=1.0, offset=2).next(1)
        2.0
        >>> FibonacciInterval(base_delay=1.0, max_delay=10.0).next(11)
        10.0

        ```
    """

    def __init__(
        self,
        base_delay: float = DEFAULT_INTERVAL,
        offset: int = 0,
        max_delay: float | None = None,
    ) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if offset < 0:
            msg = f"offset must be non-negative, got {offset}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.offset = offset
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"offset={self.offset}, max_delay={self.max_delay})"
        )

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed).

        Args:
            n: The position in the Fibonacci sequence (1-indexed).

        Returns:
            The nth Fibonacci number.
        """
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def next(self, attempt: int) -> float:
        delay = self.base_delay * self._fibonacci(attempt + self.offset)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
