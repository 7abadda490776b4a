r"""Bookkeeping for a single eventually block.

This module provides the EventuallyControl class that tracks elapsed time,
attempt counters and error history for one call, and decides whether the
retry loop may start another attempt.
"""

from __future__ import annotations

__all__ = ["LONG_WAIT_TOLERANCE", "EventuallyControl"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from aeventually.state import EventuallyState

if TYPE_CHECKING:
    from aeventually.config import EventuallyConfig

logger: logging.Logger = logging.getLogger(__name__)

# Minimum measured overshoot in seconds for a wait to count as late
LONG_WAIT_TOLERANCE = 0.001


class EventuallyControl:
    """Mutable state of one eventually block.

    A new instance is created for every call and is never shared between
    calls. The timestamps come from ``time.monotonic``.

    Args:
        config: The configuration of the block.

    Attributes:
        start: Monotonic timestamp when the block started.
        end: Monotonic timestamp after which no new attempt starts.
        times: Number of completed wait steps. It increases by exactly one
            per wait step, so it is also the number of attempts made once
            the loop exits.
        predicate_failed_times: Number of attempts rejected by the predicate.
        first_error: The first error raised by the operation.
        last_error: The most recent error raised by the operation, once a
            second error was raised.
        last_interval: The delay computed by the interval strategy for the
            last wait step.
        last_delay_period: The delay actually measured during the last wait
            step.
    """

    def __init__(self, config: EventuallyConfig) -> None:
        self.config = config
        self.start = time.monotonic()
        self.end = self.start + config.duration

        self.times = 0
        self.predicate_failed_times = 0

        self.first_error: BaseException | None = None
        self.last_error: BaseException | None = None

        self.last_interval = 0.0
        self.last_delay_period = 0.0

    def attempts_remaining(self) -> bool:
        """Indicate if the time and attempt budgets allow another attempt."""
        if time.monotonic() >= self.end:
            return False
        return self.config.max_attempts is None or self.times < self.config.max_attempts

    def is_long_wait(self) -> bool:
        """Indicate if the single attempt made so far deserves a second one.

        When only one attempt was made and the scheduler overshot the delay
        computed by the interval strategy, the block may not have had a
        fair chance to run again within its budget, so one more attempt is
        granted even if the deadline has passed.

        Delays are compared at millisecond resolution: the scheduler must be
        late by at least ``LONG_WAIT_TOLERANCE`` for the wait to count.
        """
        overshoot = self.last_delay_period - self.last_interval
        return self.times == 1 and overshoot >= LONG_WAIT_TOLERANCE

    def record_error(self, error: BaseException) -> None:
        """Record an error raised by the operation.

        Args:
            error: The raised error.
        """
        if self.first_error is None:
            self.first_error = error
        else:
            self.last_error = error

    def to_state(self, result: Any = None) -> EventuallyState:
        """Build the state of the current attempt.

        Args:
            result: The value returned by the attempt, or None if it raised.

        Returns:
            The immutable state passed to callbacks.
        """
        return EventuallyState(
            result=result,
            started_at=self.start,
            deadline_at=self.end,
            attempt=self.times + 1,
            first_error=self.first_error,
            last_error=self.last_error,
        )

    def elapsed(self) -> float:
        """Return the number of seconds since the block started."""
        return time.monotonic() - self.start

    async def step(self) -> None:
        """Wait before the next attempt.

        The delay comes from the interval strategy and the real suspension
        time is measured for ``is_long_wait``.
        """
        self.times += 1
        self.last_interval = self.config.interval.next(self.times)
        logger.debug(f"Waiting {self.last_interval:.3f}s before attempt {self.times + 1}")
        mark = time.monotonic()
        await asyncio.sleep(self.last_interval)
        self.last_delay_period = time.monotonic() - mark
