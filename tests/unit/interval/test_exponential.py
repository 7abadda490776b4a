r"""Unit tests for ExponentialInterval strategy."""

from __future__ import annotations

import pytest

from aeventually.interval import ExponentialInterval


def test_exponential_interval_basic() -> None:
    """Test the first wait is the base delay and grows by the factor."""
    interval = ExponentialInterval(base_delay=0.5)
    assert interval.next(1) == 0.5
    assert interval.next(2) == 1.0
    assert interval.next(3) == 2.0
    assert interval.next(4) == 4.0


def test_exponential_interval_custom_factor() -> None:
    """Test exponential interval with a custom growth factor."""
    interval = ExponentialInterval(base_delay=1.0, factor=3.0)
    assert interval.next(1) == 1.0
    assert interval.next(3) == 9.0


def test_exponential_interval_with_max_delay() -> None:
    """Test exponential interval respects max_delay cap."""
    interval = ExponentialInterval(base_delay=1.0, max_delay=5.0)
    assert interval.next(3) == 4.0
    assert interval.next(4) == 5.0
    assert interval.next(10) == 5.0


def test_exponential_interval_max_delay_large_attempt() -> None:
    """Test the cap holds when the exponential overflows a float."""
    interval = ExponentialInterval(base_delay=1.0, max_delay=5.0)
    assert interval.next(5000) == 5.0


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"base_delay": -0.1}, r"base_delay must be non-negative"),
        ({"factor": 0.5}, r"factor must be >= 1"),
        ({"max_delay": -2.0}, r"max_delay must be positive"),
    ],
)
def test_exponential_interval_invalid_parameters(kwargs: dict, match: str) -> None:
    """Test that invalid parameters raise ValueError."""
    with pytest.raises(ValueError, match=match):
        ExponentialInterval(**kwargs)


def test_exponential_interval_repr() -> None:
    """Test the repr lists every parameter."""
    assert (
        repr(ExponentialInterval(0.5))
        == "ExponentialInterval(base_delay=0.5, factor=2.0, max_delay=None)"
    )
