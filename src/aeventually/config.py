r"""Configuration dataclass and defaults for eventually blocks.

This module provides the configuration constants and the immutable
configuration object consumed by ``AsyncEventuallyExecutor``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_SUPPRESSED_EXCEPTIONS",
    "EventuallyConfig",
]

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from aeventually.interval import BaseInterval, FixedInterval, FunctionInterval
from aeventually.utils.duration import to_seconds
from aeventually.utils.validation import (
    validate_eventually_params,
    validate_suppress_exceptions,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aeventually.state import EventuallyState


# Default time budget in seconds
# Large enough to never be the limiting factor unless configured
DEFAULT_DURATION = 3600.0

# Default delay in seconds before the first attempt
DEFAULT_INITIAL_DELAY = 0.0

# Exception kinds retried when eventually() or until() are called without
# an explicit config: failed assertions are the usual reason to poll
DEFAULT_SUPPRESSED_EXCEPTIONS: tuple[type[BaseException], ...] = (AssertionError,)


@dataclass(frozen=True)
class EventuallyConfig:
    """Configuration of an eventually block.

    The configuration is immutable: use ``merge`` to derive a new
    configuration with some parameters overridden.

    Args:
        duration: Total time budget in seconds (or a ``timedelta``). No new
            attempt starts once it is consumed. Must be > 0.
        interval: Interval strategy computing the delay between attempts.
            A number of seconds (or a ``timedelta``) means a fixed interval
            and a plain callable ``(attempt) -> seconds`` is also accepted.
        initial_delay: Delay in seconds (or a ``timedelta``) before the
            first attempt. Must be >= 0.
        max_attempts: Optional maximum number of attempts. None means
            unbounded. Must be >= 1 if provided.
        suppress_exceptions: Exception classes that are retried instead of
            propagated. Subclasses match too.
        suppress_exception_if: Optional predicate receiving a raised error.
            When it returns False, the error propagates even if its class
            is listed in ``suppress_exceptions``.
        on_attempt: Optional callback invoked with the state after every
            attempt, successful or not.
        predicate: Optional success predicate receiving the state of a
            successful attempt. When absent, any attempt that does not
            raise succeeds.
        short_circuit: Optional predicate receiving the state of a
            successful attempt. When it returns True, the block aborts with
            ``ShortCircuitError``.

    Example:
        ```pycon
        >>> from aeventually.config import EventuallyConfig
        >>> from aeventually.interval import FixedInterval
        >>> config = EventuallyConfig(duration=5.0, interval=FixedInterval(0.1))
        >>> config.duration
        5.0
        >>> merged = config.merge(max_attempts=3)
        >>> merged.max_attempts
        3
        >>> config.max_attempts is None
        True

        ```
    """

    duration: float = DEFAULT_DURATION
    interval: BaseInterval = field(default_factory=FixedInterval)
    initial_delay: float = DEFAULT_INITIAL_DELAY
    max_attempts: int | None = None
    suppress_exceptions: tuple[type[BaseException], ...] = ()
    suppress_exception_if: Callable[[BaseException], bool] | None = None
    on_attempt: Callable[[EventuallyState], None] | None = None
    predicate: Callable[[EventuallyState], bool] | None = None
    short_circuit: Callable[[EventuallyState], bool] | None = None

    def __post_init__(self) -> None:
        """Normalize and validate configuration parameters.

        Raises:
            TypeError: If a parameter has an unsupported type.
            ValueError: If any parameter fails validation.
        """
        # frozen dataclass: normalized values are written with object.__setattr__
        object.__setattr__(self, "duration", to_seconds(self.duration))
        object.__setattr__(self, "initial_delay", to_seconds(self.initial_delay))
        if isinstance(self.interval, (int, float, timedelta)):
            object.__setattr__(self, "interval", FixedInterval(to_seconds(self.interval)))
        elif not isinstance(self.interval, BaseInterval):
            object.__setattr__(self, "interval", FunctionInterval(self.interval))
        if isinstance(self.suppress_exceptions, type):
            object.__setattr__(self, "suppress_exceptions", (self.suppress_exceptions,))
        else:
            object.__setattr__(self, "suppress_exceptions", tuple(self.suppress_exceptions))

        validate_eventually_params(
            duration=self.duration,
            initial_delay=self.initial_delay,
            max_attempts=self.max_attempts,
        )
        validate_suppress_exceptions(self.suppress_exceptions)

    def merge(self, **overrides: Any) -> EventuallyConfig:
        """Create a new config with specified parameters overridden.

        Only the parameters passed explicitly are changed, so passing None
        resets an optional parameter.

        Args:
            **overrides: Keyword arguments named after the config fields.

        Returns:
            A new EventuallyConfig instance with overrides applied.

        Raises:
            TypeError: If an override does not name a config field.

        Example:
            ```pycon
            >>> from aeventually.config import EventuallyConfig
            >>> config = EventuallyConfig(duration=2.0)
            >>> config.merge(duration=10.0).duration
            10.0
            >>> config.duration
            2.0

            ```
        """
        return replace(self, **overrides)
