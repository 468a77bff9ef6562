"""Shared test fixtures."""

from __future__ import annotations

import pytest

from uniqueid_sdk.observability.event_bus import InMemoryEventBus


class FixedClock:
    """Clock that returns a fixed timestamp."""

    def __init__(self, ms: int = 1_700_000_000_000):
        self._ms = ms

    def now_ms(self) -> int:
        return self._ms


class ScriptedRandomSource:
    """Random source that returns the same values on every draw."""

    def __init__(self, byte_value: int = 7, fraction: float = 0.5, below: int = 42):
        self._byte = byte_value
        self._fraction = fraction
        self._below = below
        self.calls = 0

    def random_bytes(self, size: int) -> bytes:
        self.calls += 1
        return bytes([self._byte]) * size

    def random(self) -> float:
        return self._fraction

    def randbelow(self, n: int) -> int:
        return self._below % n


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def scripted_random():
    return ScriptedRandomSource()


@pytest.fixture
def event_bus():
    return InMemoryEventBus()
