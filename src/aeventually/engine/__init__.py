r"""Engine package implementing the eventually retry loop.

This package provides the executor of eventually blocks together with
the components it is composed of.

Public API:
    - AsyncEventuallyExecutor: Drives the retry loop
    - EventuallyControl: Per-call time, attempt and error bookkeeping
    - SuppressionDecider: Logic for deciding whether an error is retried
    - CallbackManager: Manager for the user-defined callbacks
"""

from __future__ import annotations

__all__ = [
    "LONG_WAIT_TOLERANCE",
    "AsyncEventuallyExecutor",
    "CallbackManager",
    "EventuallyControl",
    "SuppressionDecider",
]

from aeventually.engine.control import LONG_WAIT_TOLERANCE, EventuallyControl
from aeventually.engine.decider import SuppressionDecider
from aeventually.engine.executor import AsyncEventuallyExecutor
from aeventually.engine.manager import CallbackManager
