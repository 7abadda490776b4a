r"""Asynchronous executor for eventually blocks.

This module provides the AsyncEventuallyExecutor class that repeatedly
evaluates an operation until it succeeds, the time or attempt budget is
consumed, or the short-circuit function aborts the block.
"""

from __future__ import annotations

__all__ = ["AsyncEventuallyExecutor"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from aeventually.collector import ErrorCollectionMode, error_collector
from aeventually.engine.control import EventuallyControl
from aeventually.engine.decider import SuppressionDecider
from aeventually.engine.manager import CallbackManager
from aeventually.exceptions import EventuallyTimeoutError, ShortCircuitError
from aeventually.utils.diagnostics import build_failure_message
from aeventually.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aeventually.collector import ErrorCollector
    from aeventually.config import EventuallyConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncEventuallyExecutor:
    """Executes an operation until it eventually succeeds.

    The executor orchestrates the following components:
    - EventuallyControl: Tracks time, attempts and error history of a call
    - SuppressionDecider: Determines whether a raised error is retried
    - CallbackManager: Invokes the observer, predicate and short-circuit
      functions
    - The interval strategy of the config: Computes the delay between attempts

    The executor holds no per-call state, so one instance can run several
    blocks, sequentially or concurrently.

    Args:
        config: The configuration of the block.
        collector: The assertion collector whose mode is forced to ``HARD``
            while the block runs. Defaults to the module-level collector.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aeventually.config import EventuallyConfig
        >>> from aeventually.engine import AsyncEventuallyExecutor
        >>> executor = AsyncEventuallyExecutor(EventuallyConfig(duration=1.0))
        >>> async def ready() -> str:
        ...     return "ready"
        ...
        >>> asyncio.run(executor.execute(ready))
        'ready'

        ```
    """

    def __init__(
        self,
        config: EventuallyConfig,
        collector: ErrorCollector | None = None,
    ) -> None:
        self.config = config
        self.decider: SuppressionDecider = SuppressionDecider(
            config.suppress_exceptions,
            config.suppress_exception_if,
        )
        self.callbacks: CallbackManager = CallbackManager(
            on_attempt=config.on_attempt,
            predicate=config.predicate,
            short_circuit=config.short_circuit,
        )
        self.collector = collector if collector is not None else error_collector

    async def execute(self, operation: Callable[[], Awaitable[T] | T]) -> T:
        """Evaluate the operation until it eventually succeeds.

        Each iteration runs the operation once:
        - If it returns, the observer is invoked, then the short-circuit
          function and the success predicate are evaluated
        - If it raises a suppressible error, the error is recorded and the
          operation is retried after the next interval
        - If it raises any other error, the error propagates unchanged

        Cancellation and other ``BaseException`` subclasses that are not
        ``Exception`` are never caught, so they always propagate.

        Args:
            operation: Zero-argument callable returning an awaitable, or a
                plain value.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            EventuallyTimeoutError: If the time or attempt budget is consumed
                without success.
            ShortCircuitError: If the short-circuit function returns True.
        """
        if self.config.initial_delay > 0:
            await asyncio.sleep(self.config.initial_delay)

        with self.collector.collection_mode(ErrorCollectionMode.HARD):
            control = EventuallyControl(self.config)
            while control.attempts_remaining() or control.is_long_wait():
                try:
                    result = await self._invoke(operation)
                except Exception as exc:
                    suppressible = self.decider.is_suppressible(exc)
                    control.record_error(exc)
                    self.callbacks.on_attempt(control.to_state())
                    if not suppressible:
                        logger.debug(
                            f"Attempt {control.times + 1} raised non-suppressible "
                            f"{type(exc).__name__}, propagating"
                        )
                        raise
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Attempt {control.times + 1} raised {type(exc).__name__}: {exc}",
                        attempt=control.times + 1,
                        elapsed=control.elapsed(),
                        error_type=type(exc).__name__,
                    )
                else:
                    state = control.to_state(result)
                    self.callbacks.on_attempt(state)
                    if self.callbacks.should_short_circuit(state):
                        raise ShortCircuitError(state)
                    if self.callbacks.is_satisfied(state):
                        logger.debug(f"Eventually block succeeded on attempt {state.attempt}")
                        return result
                    control.predicate_failed_times += 1
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Attempt {state.attempt} did not satisfy the predicate",
                        attempt=state.attempt,
                        elapsed=control.elapsed(),
                    )

                await control.step()

        self._raise_timeout(control)

    async def _invoke(self, operation: Callable[[], Any]) -> Any:
        result = operation()
        if inspect.isawaitable(result):
            result = await result
        return result

    def _raise_timeout(self, control: EventuallyControl) -> NoReturn:
        message = build_failure_message(
            duration=self.config.duration,
            attempts=control.times,
            interval=self.config.interval,
            predicate_failures=control.predicate_failed_times,
            first_error=control.first_error,
            last_error=control.last_error,
        )
        logger.debug(
            f"Eventually block timed out after {control.times} attempt(s) "
            f"and {control.elapsed():.3f}s"
        )
        raise EventuallyTimeoutError(
            message,
            duration=self.config.duration,
            attempts=control.times,
            interval=self.config.interval,
            predicate_failures=control.predicate_failed_times,
            first_error=control.first_error,
            last_error=control.last_error,
        ) from (control.last_error or control.first_error)
