r"""Interval strategies for delays between attempts.

This package provides the interval strategies used by eventually blocks
to compute the delay between two attempts: fixed, linear, exponential and
Fibonacci growth, plain functions, and random jitter on top of any of
them.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "BaseInterval",
    "ExponentialInterval",
    "FibonacciInterval",
    "FixedInterval",
    "FunctionInterval",
    "JitterInterval",
    "LinearInterval",
]

from aeventually.interval.base import BaseInterval
from aeventually.interval.exponential import ExponentialInterval
from aeventually.interval.fibonacci import FibonacciInterval
from aeventually.interval.fixed import DEFAULT_INTERVAL, FixedInterval
from aeventually.interval.function import FunctionInterval
from aeventually.interval.jitter import JitterInterval
from aeventually.interval.linear import LinearInterval
