r"""Callback manager for the eventually lifecycle.

This module provides the CallbackManager class that invokes the
user-defined observer, success predicate and short-circuit function.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from aeventually.state import EventuallyState


class CallbackManager:
    """Manages callback invocations during an eventually block.

    Args:
        on_attempt: Optional observer invoked after every attempt.
        predicate: Optional success predicate.
        short_circuit: Optional early-exit predicate.
    """

    def __init__(
        self,
        on_attempt: Callable[[EventuallyState], None] | None = None,
        predicate: Callable[[EventuallyState], bool] | None = None,
        short_circuit: Callable[[EventuallyState], bool] | None = None,
    ) -> None:
        self.on_attempt_callback = on_attempt
        self.predicate = predicate
        self.short_circuit = short_circuit

    def on_attempt(self, state: EventuallyState) -> None:
        """Invoke the on_attempt observer if provided."""
        if self.on_attempt_callback is not None:
            self.on_attempt_callback(state)

    def should_short_circuit(self, state: EventuallyState) -> bool:
        """Return True if the short-circuit function asks to abort."""
        return self.short_circuit is not None and bool(self.short_circuit(state))

    def is_satisfied(self, state: EventuallyState) -> bool:
        """Return True if the attempt is a success.

        An attempt that did not raise is a success when no predicate is
        configured.
        """
        return self.predicate is None or bool(self.predicate(state))
