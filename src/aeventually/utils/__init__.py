r"""Utility functions for eventually blocks.

This package provides helpers for duration conversion, parameter
validation, failure diagnostics and structured logging.
"""

from __future__ import annotations

__all__ = [
    "build_failure_message",
    "describe_error",
    "log_structured",
    "to_seconds",
    "validate_eventually_params",
    "validate_suppress_exceptions",
]

from aeventually.utils.diagnostics import build_failure_message, describe_error
from aeventually.utils.duration import to_seconds
from aeventually.utils.structured_logging import log_structured
from aeventually.utils.validation import (
    validate_eventually_params,
    validate_suppress_exceptions,
)
