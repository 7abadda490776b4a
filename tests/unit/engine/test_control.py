r"""Unit tests for EventuallyControl."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from coola.equality import objects_are_equal

from aeventually.config import EventuallyConfig
from aeventually.engine import LONG_WAIT_TOLERANCE, EventuallyControl
from aeventually.interval import FixedInterval, LinearInterval
from aeventually.state import EventuallyState

if TYPE_CHECKING:
    from tests.helpers import FakeClock

#######################################
#     Tests for EventuallyControl     #
#######################################


def test_eventually_control_init(fake_clock: FakeClock) -> None:
    """Test the deadline is computed from the start time."""
    fake_clock.now = 5.0
    control = EventuallyControl(EventuallyConfig(duration=2.0))

    assert control.start == 5.0
    assert control.end == 7.0
    assert control.times == 0
    assert control.predicate_failed_times == 0
    assert control.first_error is None
    assert control.last_error is None


def test_attempts_remaining_before_deadline(fake_clock: FakeClock) -> None:
    """Test attempts remain before the deadline."""
    control = EventuallyControl(EventuallyConfig(duration=1.0))
    fake_clock.advance(0.5)
    assert control.attempts_remaining()


def test_attempts_remaining_at_deadline(fake_clock: FakeClock) -> None:
    """Test no attempt remains once the deadline is reached."""
    control = EventuallyControl(EventuallyConfig(duration=1.0))
    fake_clock.advance(1.0)
    assert not control.attempts_remaining()


def test_attempts_remaining_max_attempts(fake_clock: FakeClock) -> None:
    """Test max_attempts limits the remaining attempts."""
    control = EventuallyControl(EventuallyConfig(duration=1.0, max_attempts=2))
    control.times = 1
    assert control.attempts_remaining()
    control.times = 2
    assert not control.attempts_remaining()


def test_record_error_first_then_last() -> None:
    """Test the first error is kept and the last one is replaced."""
    control = EventuallyControl(EventuallyConfig())
    first = AssertionError("first")
    second = AssertionError("second")
    third = AssertionError("third")

    control.record_error(first)
    assert control.first_error is first
    assert control.last_error is None

    control.record_error(second)
    control.record_error(third)
    assert control.first_error is first
    assert control.last_error is third


def test_to_state(fake_clock: FakeClock) -> None:
    """Test the state snapshot of the current attempt."""
    control = EventuallyControl(EventuallyConfig(duration=1.0))
    error = AssertionError("boom")
    control.record_error(error)
    control.times = 2

    assert objects_are_equal(
        control.to_state("value"),
        EventuallyState(
            result="value", started_at=0.0, deadline_at=1.0, attempt=3, first_error=error
        ),
    )


def test_elapsed(fake_clock: FakeClock) -> None:
    """Test elapsed time since the block started."""
    control = EventuallyControl(EventuallyConfig())
    fake_clock.advance(0.75)
    assert control.elapsed() == 0.75


@pytest.mark.asyncio
async def test_step_uses_interval(fake_clock: FakeClock) -> None:
    """Test each step sleeps for the next interval delay."""
    control = EventuallyControl(
        EventuallyConfig(interval=LinearInterval(base_delay=0.25, max_delay=0.5))
    )
    await control.step()
    await control.step()
    await control.step()

    assert control.times == 3
    assert fake_clock.sleeps == [0.25, 0.5, 0.5]
    assert control.last_interval == 0.5
    assert control.last_delay_period == 0.5


@pytest.mark.asyncio
async def test_step_measures_overshoot(fake_clock: FakeClock) -> None:
    """Test a late scheduler makes the wait long."""
    fake_clock.overshoot = 0.5
    control = EventuallyControl(EventuallyConfig(interval=FixedInterval(0.25)))
    await control.step()

    assert control.last_interval == 0.25
    assert control.last_delay_period == 0.75
    assert control.is_long_wait()


@pytest.mark.asyncio
async def test_is_long_wait_on_time(fake_clock: FakeClock) -> None:
    """Test an on-time wait is not long."""
    control = EventuallyControl(EventuallyConfig(interval=FixedInterval(0.25)))
    await control.step()
    assert not control.is_long_wait()


@pytest.mark.asyncio
async def test_is_long_wait_only_after_first_step(fake_clock: FakeClock) -> None:
    """Test a late wait only counts after the first step."""
    fake_clock.overshoot = 0.5
    control = EventuallyControl(EventuallyConfig(interval=FixedInterval(0.25)))
    assert not control.is_long_wait()
    await control.step()
    await control.step()
    assert not control.is_long_wait()


@pytest.mark.asyncio
@pytest.mark.parametrize("overshoot", [0.0001, 0.0005, 0.0009])
async def test_is_long_wait_ignores_sub_millisecond_overshoot(
    fake_clock: FakeClock, overshoot: float
) -> None:
    """Test timer noise below one millisecond is not a long wait."""
    fake_clock.overshoot = overshoot
    control = EventuallyControl(EventuallyConfig(interval=FixedInterval(0.25)))
    await control.step()
    assert not control.is_long_wait()


@pytest.mark.asyncio
async def test_is_long_wait_zero_interval(fake_clock: FakeClock) -> None:
    """Test a zero interval with timer noise is not a long wait."""
    fake_clock.overshoot = 0.0002
    control = EventuallyControl(EventuallyConfig(interval=FixedInterval(0.0)))
    await control.step()
    assert not control.is_long_wait()


@pytest.mark.asyncio
async def test_is_long_wait_beyond_tolerance(fake_clock: FakeClock) -> None:
    """Test an overshoot beyond the tolerance is a long wait."""
    fake_clock.overshoot = 2 * LONG_WAIT_TOLERANCE
    control = EventuallyControl(EventuallyConfig(interval=FixedInterval(0.0)))
    await control.step()
    assert control.is_long_wait()


def test_long_wait_tolerance_is_one_millisecond() -> None:
    """Test the long wait tolerance value."""
    assert LONG_WAIT_TOLERANCE == 0.001
