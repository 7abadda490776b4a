r"""Linear interval strategy."""

from __future__ import annotations

__all__ = ["LinearInterval"]

from aeventually.interval.base import BaseInterval
from aeventually.interval.fixed import DEFAULT_INTERVAL


class LinearInterval(BaseInterval):
    """Linear interval strategy.

    Calculates delay as: base_delay * attempt, with optional max_delay cap.

    Args:
        base_delay: The base delay in seconds (default: 0.025).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aeventually.interval import LinearInterval
        >>> interval = LinearInterval(base_delay=1.0)
        >>> interval.next(1)
        1.0
        >>> interval.next(3)
        3.0
        >>> LinearInterval(base_delay=1.0, max_delay=2.5).next(10)
        2.5

        ```
    """

    def __init__(self, base_delay: float = DEFAULT_INTERVAL, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next(self, attempt: int) -> float:
        delay = self.base_delay * attempt
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
