r"""Duration conversion utilities.

Durations are handled in seconds internally; callers may pass either
a number of seconds or a ``datetime.timedelta``.
"""

from __future__ import annotations

__all__ = ["to_seconds"]

from datetime import timedelta


def to_seconds(value: float | timedelta) -> float:
    """Convert a duration to a number of seconds.

    Args:
        value: A number of seconds or a ``timedelta``.

    Returns:
        The duration in seconds.

    Raises:
        TypeError: If the value is neither a number nor a ``timedelta``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aeventually.utils.duration import to_seconds
        >>> to_seconds(1.5)
        1.5
        >>> to_seconds(timedelta(milliseconds=250))
        0.25

        ```
    """
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"duration must be a number of seconds or a timedelta, got {value!r}"
        raise TypeError(msg)
    return float(value)
