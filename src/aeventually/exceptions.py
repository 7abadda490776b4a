r"""Exceptions raised by eventually blocks.

Errors raised by the user operation are never wrapped: they either get
suppressed and retried, or propagate unchanged. The classes of this
module only describe outcomes produced by the engine itself.
"""

from __future__ import annotations

__all__ = ["EventuallyError", "EventuallyTimeoutError", "ShortCircuitError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aeventually.interval import BaseInterval
    from aeventually.state import EventuallyState


class EventuallyError(Exception):
    """Base exception for all errors raised by the eventually engine."""


class EventuallyTimeoutError(EventuallyError, AssertionError):
    """Raised when the time or attempt budget is consumed without success.

    This class derives from ``AssertionError`` so that test runners report
    an exhausted eventually block as a test failure rather than an error.

    Args:
        message: The diagnostic message.
        duration: The configured time budget in seconds.
        attempts: The number of attempts made.
        interval: The interval strategy used between attempts.
        predicate_failures: Number of attempts rejected by the predicate.
        first_error: The first error raised by the operation, if any.
        last_error: The most recent error raised by the operation, if any.

    Example:
        ```pycon
        >>> from aeventually.exceptions import EventuallyTimeoutError
        >>> from aeventually.interval import FixedInterval
        >>> error = EventuallyTimeoutError(
        ...     "Eventually block failed", duration=1.0, attempts=3, interval=FixedInterval()
        ... )
        >>> error.attempts
        3
        >>> isinstance(error, AssertionError)
        True

        ```
    """

    def __init__(
        self,
        message: str,
        duration: float,
        attempts: int,
        interval: BaseInterval,
        predicate_failures: int = 0,
        first_error: BaseException | None = None,
        last_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.duration = duration
        self.attempts = attempts
        self.interval = interval
        self.predicate_failures = predicate_failures
        self.first_error = first_error
        self.last_error = last_error


class ShortCircuitError(EventuallyError):
    """Raised when the short-circuit function aborts an eventually block.

    A short-circuit error is terminal: it is never suppressed, even when
    raised by a nested eventually block whose errors would otherwise be
    retried.

    Args:
        state: The state that triggered the short circuit.
    """

    def __init__(self, state: EventuallyState) -> None:
        super().__init__(
            f"The provided short_circuit function caused eventually to exit early: {state}"
        )
        self.state = state
