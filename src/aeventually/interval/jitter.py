r"""Random jitter wrapper for interval strategies."""

from __future__ import annotations

__all__ = ["JitterInterval"]

import logging
import random

from aeventually.interval.base import BaseInterval

logger: logging.Logger = logging.getLogger(__name__)


class JitterInterval(BaseInterval):
    """Add random jitter on top of another interval strategy.

    The jitter is calculated as ``random.uniform(0, jitter_factor) * delay``
    and is ADDED to the delay of the wrapped strategy, so the result is
    never shorter than the wrapped delay.

    Args:
        interval: The wrapped interval strategy.
        jitter_factor: Maximum relative jitter. Must be >= 0. A value of
            0.1 adds up to 10% additional random delay.

    Example:
        ```pycon
        >>> from aeventually.interval import FixedInterval, JitterInterval
        >>> interval = JitterInterval(FixedInterval(1.0), jitter_factor=0.1)
        >>> 1.0 <= interval.next(1) <= 1.1
        True

        ```
    """

    def __init__(self, interval: BaseInterval, jitter_factor: float = 0.1) -> None:
        if not isinstance(interval, BaseInterval):
            msg = f"interval must be a BaseInterval, got {interval!r}"
            raise TypeError(msg)
        if jitter_factor < 0:
            msg = f"jitter_factor must be >= 0, got {jitter_factor}"
            raise ValueError(msg)
        self.interval = interval
        self.jitter_factor = jitter_factor

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(interval={self.interval!r}, "
            f"jitter_factor={self.jitter_factor})"
        )

    def next(self, attempt: int) -> float:
        delay = self.interval.next(attempt)
        if self.jitter_factor <= 0:
            return delay
        jitter = random.uniform(0, self.jitter_factor) * delay  # noqa: S311
        logger.debug(f"Adding {jitter:.3f}s jitter to {delay:.3f}s interval")
        return delay + jitter
