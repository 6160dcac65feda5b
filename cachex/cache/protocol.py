"""Store contract expected by the memoizing wrapper and the invalidator."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Asynchronous key-value backend.

    Every method may suspend and may raise; callers in this package never
    catch those errors. Expiration is enforced by the store, not by cachex.
    """

    async def get(self, key: str) -> Any | None:
        """Return the stored value, or ``None`` if absent or expired."""
        ...

    async def set(self, key: str, value: Any, expire: int) -> None:
        """Store ``value`` under ``key`` for ``expire`` seconds."""
        ...

    async def delete(self, key: str) -> None:
        """Remove ``key``. Missing keys are not an error."""
        ...
