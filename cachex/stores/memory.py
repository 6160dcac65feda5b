"""In-process store with per-key expiration.

Intended for tests, scripts and single-process services. Expired entries are
dropped lazily on ``get``.
"""

from __future__ import annotations

import time
from typing import Any, Callable

from cachex.logging_config import get_logger

logger = get_logger(name=__name__)


class MemoryStore:
    """Dict-backed ``CacheStore``.

    Example:
        store = MemoryStore()
        await store.set("user:fetchProfile:42", {"name": "Ann"}, 60)
        await store.get("user:fetchProfile:42")
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[Any, float]] = {}
        self._clock = clock

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            logger.debug("Expired entry dropped: {}", key)
            return None
        return value

    async def set(self, key: str, value: Any, expire: int) -> None:
        if expire <= 0:
            raise ValueError(f"expire must be a positive number of seconds, got {expire}")
        self._entries[key] = (value, self._clock() + expire)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
