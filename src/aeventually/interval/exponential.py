r"""Exponential interval strategy."""

from __future__ import annotations

__all__ = ["ExponentialInterval"]

import math

from aeventually.interval.base import BaseInterval
from aeventually.interval.fixed import DEFAULT_INTERVAL


class ExponentialInterval(BaseInterval):
    """Exponential interval strategy.

    Calculates delay as: base_delay * (factor ** (attempt - 1)), with
    optional max_delay cap. The first wait is therefore ``base_delay``.

    Args:
        base_delay: The delay after the first attempt (default: 0.025).
        factor: The growth factor applied after each attempt (default: 2.0).
            Must be >= 1.
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aeventually.interval import ExponentialInterval
        >>> interval = ExponentialInterval(base_delay=0.5)
        >>> interval.next(1)
        0.5
        >>> interval.next(2)
        1.0
        >>> interval.next(3)
        2.0
        >>> ExponentialInterval(base_delay=1.0, max_delay=5.0).next(10)
        5.0

        ```
    """

    def __init__(
        self,
        base_delay: float = DEFAULT_INTERVAL,
        factor: float = 2.0,
        max_delay: float | None = None,
    ) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if factor < 1:
            msg = f"factor must be >= 1, got {factor}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.factor = factor
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"factor={self.factor}, max_delay={self.max_delay})"
        )

    def next(self, attempt: int) -> float:
        """Calculate exponential delay.

        Args:
            attempt: The number of attempts made so far (1-indexed).

        Returns:
            The calculated delay: base_delay * (factor ** (attempt - 1)),
            capped at max_delay if set.
        """
        try:
            delay = self.base_delay * self.factor ** (attempt - 1)
        except OverflowError:
            delay = math.inf
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
