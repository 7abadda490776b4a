r"""aeventually - Bounded polling and retry of asynchronous operations.

This package repeatedly evaluates an operation until a success condition
holds, a deadline expires, or an early-exit condition fires. It is meant
for tests and tooling that wait for an eventually consistent system:
a service becoming healthy, a message reaching a queue, a cache being
populated.

Key Features:
    - Time and attempt budgets, with an initial delay
    - Interval strategies: Fixed, Linear, Exponential, Fibonacci, custom
      functions, and optional jitter
    - Exception suppression by class, with a veto predicate
    - Success predicate, short-circuit abort and per-attempt observer
    - Detailed timeout diagnostics including the first and last errors
    - Cooperative asyncio suspension, cancellation always propagates

Example:
    ```pycon
    >>> import asyncio
    >>> from aeventually import eventually, until
    >>> from aeventually.interval import ExponentialInterval
    >>> async def check_ready() -> bool:
    ...     return True
    ...
    >>> asyncio.run(until(check_ready, duration=10.0))
    >>> asyncio.run(
    ...     eventually(check_ready, duration=10.0, interval=ExponentialInterval(0.05))
    ... )
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncEventuallyExecutor",
    "ErrorCollectionMode",
    "EventuallyConfig",
    "EventuallyError",
    "EventuallyState",
    "EventuallyTimeoutError",
    "ShortCircuitError",
    "__version__",
    "error_collector",
    "eventually",
    "until",
]

from importlib.metadata import PackageNotFoundError, version

from aeventually.collector import ErrorCollectionMode, error_collector
from aeventually.config import EventuallyConfig
from aeventually.engine import AsyncEventuallyExecutor
from aeventually.eventually import eventually, until
from aeventually.exceptions import (
    EventuallyError,
    EventuallyTimeoutError,
    ShortCircuitError,
)
from aeventually.state import EventuallyState

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
