r"""Failure diagnostics for exhausted eventually blocks.

This module builds the human readable message attached to
``EventuallyTimeoutError`` when the time or attempt budget is consumed
without success.
"""

from __future__ import annotations

__all__ = ["build_failure_message", "describe_error"]

import traceback
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aeventually.interval import BaseInterval


def describe_error(error: BaseException) -> str:
    """Format an error with its traceback.

    Args:
        error: The error to describe.

    Returns:
        The formatted traceback, including the error type and message.
    """
    return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip()


def build_failure_message(
    duration: float,
    attempts: int,
    interval: BaseInterval,
    predicate_failures: int = 0,
    first_error: BaseException | None = None,
    last_error: BaseException | None = None,
) -> str:
    """Build the failure message of a timed out eventually block.

    Args:
        duration: The configured time budget in seconds.
        attempts: The number of attempts made.
        interval: The interval strategy, described through its ``repr``.
        predicate_failures: Number of attempts rejected by the predicate.
        first_error: The first error raised by the operation, if any.
        last_error: The most recent error raised by the operation, if any.

    Returns:
        The multi-line failure message.

    Example:
        ```pycon
        >>> from aeventually.interval import FixedInterval
        >>> from aeventually.utils.diagnostics import build_failure_message
        >>> print(build_failure_message(1.0, 10, FixedInterval(0.1), predicate_failures=10))
        Eventually block failed after 1.0s; attempted 10 time(s); FixedInterval(delay=0.1) delay between attempts
        The provided predicate failed 10 times

        ```
    """
    lines = [
        f"Eventually block failed after {duration}s; attempted {attempts} time(s); "
        f"{interval!r} delay between attempts"
    ]
    if predicate_failures > 0:
        lines.append(f"The provided predicate failed {predicate_failures} times")
    if first_error is not None:
        lines.append(f"The first error was caused by: {first_error}")
        lines.append(describe_error(first_error))
    if last_error is not None:
        lines.append(f"The last error was caused by: {last_error}")
        lines.append(describe_error(last_error))
    return "\n".join(lines)
