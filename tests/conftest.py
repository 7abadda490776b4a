from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aeventually.collector import ErrorCollector
from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Drive the engine with a fake monotonic clock.

    Only the clock of ``aeventually.engine.control`` is replaced, the
    event loop keeps using the real one.
    """
    clock = FakeClock()
    with (
        patch("aeventually.engine.control.time", Mock(monotonic=clock.monotonic)),
        patch("asyncio.sleep", new=clock.sleep),
    ):
        yield clock


@pytest.fixture
def collector() -> ErrorCollector:
    """Create an isolated assertion collector."""
    return ErrorCollector(name="test")


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
