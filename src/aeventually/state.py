r"""Immutable per-attempt state exposed to callbacks."""

from __future__ import annotations

__all__ = ["EventuallyState"]

import time
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EventuallyState:
    """Snapshot of an eventually block after one attempt.

    A new state is built after every attempt and passed to the
    ``on_attempt``, ``predicate`` and ``short_circuit`` callbacks.

    Attributes:
        result: The value returned by the attempt, or None if it raised.
        started_at: Monotonic timestamp when the block started.
        deadline_at: Monotonic timestamp after which no new attempt starts.
        attempt: The attempt number (1-indexed).
        first_error: The first error raised by the operation, if any.
        last_error: The most recent error raised by the operation. It stays
            None until a second error is raised.
    """

    result: Any
    started_at: float
    deadline_at: float
    attempt: int
    first_error: BaseException | None = None
    last_error: BaseException | None = None

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the block started."""
        return time.monotonic() - self.started_at
