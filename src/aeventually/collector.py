r"""Ambient assertion-collection mode.

Assertion helpers can either raise a failure immediately (``HARD`` mode)
or collect it and report all failures together later (``SOFT`` mode).
Eventually blocks need every failure to surface as an exception so that
it can be retried, so they force ``HARD`` mode for their whole duration.

The mode lives in a context variable: every asyncio task has its own
copy, and scoped changes are undone with ``ContextVar.reset``, so nested
and concurrent eventually blocks never see each other's mode.

Example:
    ```pycon
    >>> from aeventually.collector import ErrorCollectionMode, error_collector
    >>> error_collector.get_collection_mode()
    <ErrorCollectionMode.HARD: 'hard'>
    >>> with error_collector.collection_mode(ErrorCollectionMode.SOFT):
    ...     error_collector.collect_or_raise(AssertionError("boom"))
    ...     len(error_collector.errors())
    ...
    1
    >>> error_collector.clear()

    ```
"""

from __future__ import annotations

__all__ = ["ErrorCollectionMode", "ErrorCollector", "error_collector"]

import contextvars
import logging
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

logger: logging.Logger = logging.getLogger(__name__)


class ErrorCollectionMode(Enum):
    """How assertion failures are reported."""

    SOFT = "soft"
    HARD = "hard"


class ErrorCollector:
    """Context-local holder of the collection mode and collected errors.

    Args:
        name: Name used for the underlying context variables.
        default_mode: The mode used when none was set in the current context.
    """

    def __init__(
        self,
        name: str = "aeventually",
        default_mode: ErrorCollectionMode = ErrorCollectionMode.HARD,
    ) -> None:
        self._mode: contextvars.ContextVar[ErrorCollectionMode] = contextvars.ContextVar(
            f"{name}_collection_mode", default=default_mode
        )
        self._errors: contextvars.ContextVar[tuple[BaseException, ...]] = contextvars.ContextVar(
            f"{name}_collected_errors", default=()
        )

    def get_collection_mode(self) -> ErrorCollectionMode:
        """Return the collection mode of the current context."""
        return self._mode.get()

    def set_collection_mode(self, mode: ErrorCollectionMode) -> None:
        """Set the collection mode of the current context."""
        self._mode.set(mode)

    @contextmanager
    def collection_mode(self, mode: ErrorCollectionMode) -> Generator[None, None, None]:
        """Use a collection mode for the duration of a ``with`` block.

        The previous mode is restored on every exit path, including
        exceptions and task cancellation.

        Args:
            mode: The mode to use inside the block.
        """
        token = self._mode.set(mode)
        try:
            yield
        finally:
            self._mode.reset(token)

    def collect_or_raise(self, error: BaseException) -> None:
        """Report an assertion failure according to the current mode.

        Args:
            error: The failure to report.

        Raises:
            BaseException: The given error, in ``HARD`` mode.
        """
        if self.get_collection_mode() is ErrorCollectionMode.HARD:
            raise error
        logger.debug(f"Collecting {type(error).__name__} in soft mode: {error}")
        self._errors.set((*self._errors.get(), error))

    def errors(self) -> tuple[BaseException, ...]:
        """Return the errors collected in the current context."""
        return self._errors.get()

    def clear(self) -> None:
        """Drop the errors collected in the current context."""
        self._errors.set(())


error_collector = ErrorCollector()
