r"""Fixed interval strategy."""

from __future__ import annotations

__all__ = ["DEFAULT_INTERVAL", "FixedInterval"]

from aeventually.interval.base import BaseInterval

# Default delay in seconds between two attempts
DEFAULT_INTERVAL = 0.025


class FixedInterval(BaseInterval):
    """Fixed interval strategy.

    Returns the same delay after every attempt, regardless of the attempt number.

    Args:
        delay: The fixed delay in seconds (default: 0.025).

    Example:
        ```pycon
        >>> from aeventually.interval import FixedInterval
        >>> interval = FixedInterval(delay=0.5)
        >>> interval.next(1)
        0.5
        >>> interval.next(10)
        0.5
        >>> interval
        FixedInterval(delay=0.5)

        ```
    """

    def __init__(self, delay: float = DEFAULT_INTERVAL) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def next(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
