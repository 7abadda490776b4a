r"""Classification of errors raised by the operation.

This module provides the SuppressionDecider class that decides whether an
error raised by the operation is absorbed and retried, or propagated.
"""

from __future__ import annotations

__all__ = ["SuppressionDecider"]

import logging
from typing import TYPE_CHECKING

from aeventually.exceptions import ShortCircuitError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class SuppressionDecider:
    """Decides whether an error should be suppressed.

    The rules are applied in order:

    1. A ``ShortCircuitError`` is never suppressed.
    2. If ``suppress_exception_if`` returns False, the error is not
       suppressed.
    3. Otherwise the error is suppressed if it is an instance of one of
       ``suppress_exceptions``.

    Args:
        suppress_exceptions: Exception classes that are retried.
        suppress_exception_if: Optional predicate that can veto suppression.
    """

    def __init__(
        self,
        suppress_exceptions: tuple[type[BaseException], ...],
        suppress_exception_if: Callable[[BaseException], bool] | None = None,
    ) -> None:
        self.suppress_exceptions = suppress_exceptions
        self.suppress_exception_if = suppress_exception_if

    def is_suppressible(self, error: BaseException) -> bool:
        """Determine if an error should be retried.

        Args:
            error: The error raised by the operation.

        Returns:
            True if the error should be absorbed and the operation retried,
            False if it should propagate.
        """
        if isinstance(error, ShortCircuitError):
            return False
        if self.suppress_exception_if is not None and not self.suppress_exception_if(error):
            logger.debug(f"suppress_exception_if returned False for {type(error).__name__}")
            return False
        return isinstance(error, self.suppress_exceptions)
