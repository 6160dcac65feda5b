"""Tests for cache/invalidation.py."""

from __future__ import annotations

import pytest

from cachex.cache.decorator import memoize
from cachex.cache.invalidation import invalidate


class TestInvalidate:
    @pytest.mark.asyncio
    async def test_single_delete_with_joined_key(self, mock_store):
        await invalidate(mock_store, "user", "fetchProfile:42")

        mock_store.delete.assert_awaited_once_with("user:fetchProfile:42")
        mock_store.get.assert_not_called()
        mock_store.set.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, mock_store):
        mock_store.delete.side_effect = ConnectionError("down")

        with pytest.raises(ConnectionError, match="down"):
            await invalidate(mock_store, "user", "fetchProfile:42")

    @pytest.mark.asyncio
    async def test_missing_key_is_not_an_error(self, memory_store):
        await invalidate(memory_store, "user", "nothing:here")
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_forces_recompute_of_memoized_call(self, memory_store, profile_operation):
        fetch = memoize(memory_store, "user", "fetchProfile", profile_operation, 60)

        await fetch("42")
        await invalidate(memory_store, "user", "fetchProfile:42")
        await fetch("42")

        assert profile_operation.await_count == 2
