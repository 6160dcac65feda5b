"""Cache invalidation.

Deletes a single entry by prefix and key fragment.
"""

from cachex.logging_config import get_logger

from .keys import entry_key
from .protocol import CacheStore

logger = get_logger(name=__name__)


async def invalidate(store: CacheStore, prefix: str, key: str) -> None:
    """Delete the cache entry stored under ``{prefix}:{key}``.

    Args:
        store: Backend implementing ``delete``
        prefix: Key namespace used when the entry was cached (e.g., "user")
        key: Remainder of the key (e.g., "fetchProfile:42")

    Store errors propagate to the caller.
    """
    full_key = entry_key(prefix, key)
    await store.delete(full_key)
    logger.debug("Invalidated cache key {}", full_key)
