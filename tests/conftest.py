"""Shared test fixtures."""

from __future__ import annotations

import pytest

from healthcheck.health.engine import IntegrationRegistry


class FakeClock:
    """Manually advanced clock (seconds since epoch)."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 0, minutes: float = 0) -> None:
        self.now += seconds + minutes * 60


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(clock: FakeClock) -> IntegrationRegistry:
    """An empty registry driven by the fake clock."""
    return IntegrationRegistry(clock=clock)
