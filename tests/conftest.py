# conftest.py - shared fixtures (deterministic clocks)

import pytest


class FakeClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now=1_700_000_000.0):
        self.now = float(now)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
