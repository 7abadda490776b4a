r"""Parameter validation utilities for eventually blocks.

This module provides validation functions for the configuration
parameters to ensure they meet the required constraints before the
retry loop starts.
"""

from __future__ import annotations

__all__ = ["validate_eventually_params", "validate_suppress_exceptions"]


def validate_eventually_params(
    duration: float,
    initial_delay: float = 0.0,
    max_attempts: int | None = None,
) -> None:
    """Validate eventually parameters.

    Args:
        duration: Total time budget in seconds. Must be > 0.
        initial_delay: Delay before the first attempt in seconds.
            Must be >= 0.
        max_attempts: Optional maximum number of attempts.
            Must be >= 1 if provided.

    Raises:
        TypeError: If max_attempts is not an integer.
        ValueError: If duration is non-positive, initial_delay is negative,
            or max_attempts is lower than 1.

    Example:
        ```pycon
        >>> from aeventually.utils.validation import validate_eventually_params
        >>> validate_eventually_params(duration=5.0)
        >>> validate_eventually_params(duration=5.0, initial_delay=0.1, max_attempts=3)
        >>> validate_eventually_params(duration=0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: duration must be > 0, got 0

        ```
    """
    if duration <= 0:
        msg = f"duration must be > 0, got {duration}"
        raise ValueError(msg)
    if initial_delay < 0:
        msg = f"initial_delay must be >= 0, got {initial_delay}"
        raise ValueError(msg)
    if max_attempts is not None:
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
            msg = f"max_attempts must be an int, got {max_attempts!r}"
            raise TypeError(msg)
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)


def validate_suppress_exceptions(suppress_exceptions: tuple[object, ...]) -> None:
    """Validate that every suppressed kind is an exception class.

    Args:
        suppress_exceptions: The exception kinds to check.

    Raises:
        TypeError: If an entry is not a subclass of ``BaseException``.
    """
    for kind in suppress_exceptions:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            msg = f"suppress_exceptions must only contain exception classes, got {kind!r}"
            raise TypeError(msg)
