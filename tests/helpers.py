from __future__ import annotations

__all__ = ["FakeClock"]


class FakeClock:
    """Monotonic clock advanced only by the patched ``asyncio.sleep``.

    ``overshoot`` is added to every sleep to simulate a late scheduler.
    Tests use delays that are exact binary fractions (0.25, 0.5, ...) so
    that measured delays compare exactly with computed ones.
    """

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self.overshoot = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, delay: float, result: object = None) -> object:
        self.sleeps.append(delay)
        self.now += delay + self.overshoot
        return result
