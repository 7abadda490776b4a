r"""Entry points for eventually and until blocks.

This module provides the ``eventually`` and ``until`` coroutines, which
resolve a configuration and run it with ``AsyncEventuallyExecutor``.
"""

from __future__ import annotations

__all__ = ["eventually", "until"]

from typing import TYPE_CHECKING, Any, TypeVar

from aeventually.config import DEFAULT_SUPPRESSED_EXCEPTIONS, EventuallyConfig
from aeventually.engine.executor import AsyncEventuallyExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aeventually.state import EventuallyState

T = TypeVar("T")


def _resolve_config(config: EventuallyConfig | None) -> EventuallyConfig:
    if config is not None:
        return config
    return EventuallyConfig(suppress_exceptions=DEFAULT_SUPPRESSED_EXCEPTIONS)


def _is_true(state: EventuallyState) -> bool:
    return state.result is True


async def eventually(
    operation: Callable[[], Awaitable[T] | T],
    config: EventuallyConfig | None = None,
    **overrides: Any,
) -> T:
    """Evaluate an operation until it succeeds or its budget is consumed.

    Without ``config``, failed assertions (``AssertionError``) are retried
    and every other error propagates. With ``config``, its
    ``suppress_exceptions`` are used as is. Keyword overrides are applied on
    top of either base.

    Args:
        operation: Zero-argument callable returning an awaitable, or a
            plain value.
        config: Optional base configuration.
        **overrides: ``EventuallyConfig`` fields overriding the base
            configuration, e.g. ``duration=5.0`` or ``max_attempts=3``.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        EventuallyTimeoutError: If the budget is consumed without success.
        ShortCircuitError: If the short-circuit function returns True.
        TypeError: If an override does not name a config field.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aeventually import eventually
        >>> attempts = []
        >>> async def fetch() -> int:
        ...     attempts.append(1)
        ...     assert len(attempts) >= 3, "not ready yet"
        ...     return len(attempts)
        ...
        >>> asyncio.run(eventually(fetch, duration=5.0, interval=0.01))
        3

        ```
    """
    resolved = _resolve_config(config)
    if overrides:
        resolved = resolved.merge(**overrides)
    return await AsyncEventuallyExecutor(resolved).execute(operation)


async def until(
    operation: Callable[[], Awaitable[bool] | bool],
    config: EventuallyConfig | None = None,
    **overrides: Any,
) -> None:
    """Evaluate an operation until it returns ``True``.

    This is ``eventually`` with a predicate accepting only results that are
    ``True``. The predicate is installed before the keyword overrides are
    applied, so a ``predicate`` override replaces it.

    Args:
        operation: Zero-argument callable returning a boolean, or an
            awaitable of a boolean.
        config: Optional base configuration.
        **overrides: ``EventuallyConfig`` fields overriding the base
            configuration.

    Raises:
        EventuallyTimeoutError: If the operation does not return ``True``
            within the budget.
        ShortCircuitError: If the short-circuit function returns True.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aeventually import until
        >>> values = iter([False, False, True])
        >>> asyncio.run(until(lambda: next(values), duration=5.0, interval=0.01))

        ```
    """
    resolved = _resolve_config(config).merge(predicate=_is_true)
    if overrides:
        resolved = resolved.merge(**overrides)
    await AsyncEventuallyExecutor(resolved).execute(operation)
