"""
Shared fixtures for attribute tests.
"""

import asyncio

import pytest


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def spin():
    """Let the event loop run a few iterations so pending scheduler ticks fire."""

    async def _spin(turns: int = 5) -> None:
        for _ in range(turns):
            await asyncio.sleep(0)

    return _spin
