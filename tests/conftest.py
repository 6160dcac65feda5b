"""Shared test fixtures.

Provides a mocked store, an in-memory store driven by a fake clock, and
call-recording operations. No external services are required.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from cachex.stores.memory import MemoryStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# === FIXTURES: Stores ===


@pytest.fixture
def mock_store() -> MagicMock:
    """Store whose get/set/delete are AsyncMocks; get returns a miss by default."""
    store = MagicMock()
    store.get = AsyncMock(return_value=None)
    store.set = AsyncMock(return_value=None)
    store.delete = AsyncMock(return_value=None)
    return store


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store(clock: FakeClock) -> MemoryStore:
    return MemoryStore(clock=clock)


# === FIXTURES: Wrapped operations ===


@pytest.fixture
def profile_operation() -> AsyncMock:
    """Operation returning a small profile dict."""
    return AsyncMock(return_value={"name": "Ann"})
