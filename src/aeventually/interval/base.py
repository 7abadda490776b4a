r"""Abstract base class for interval strategies."""

from __future__ import annotations

__all__ = ["BaseInterval"]

from abc import ABC, abstractmethod


class BaseInterval(ABC):
    """Abstract base class for interval strategies.

    An interval strategy determines how long to wait between two attempts
    of an eventually block, based on the number of attempts made so far.
    Strategies may be stateless or track their own state internally, but
    they must support being called repeatedly.

    The ``repr`` of a strategy is used in timeout diagnostics, so
    subclasses should describe their parameters there.
    """

    @abstractmethod
    def next(self, attempt: int) -> float:
        """Calculate the delay before the next attempt.

        Args:
            attempt: The number of attempts made so far (1-indexed). For
                example, attempt=1 is the delay after the first attempt.

        Returns:
            The delay in seconds before the next attempt.
        """
