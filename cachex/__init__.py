"""cachex: memoize async operations against a key-value store."""

from .cache import (
    CacheKeyError,
    CacheStore,
    build_cache_key,
    cached,
    entry_key,
    invalidate,
    memoize,
)
from .stores import MemoryStore, RedisStore

__all__ = [
    "memoize",
    "cached",
    "invalidate",
    "build_cache_key",
    "entry_key",
    "CacheKeyError",
    "CacheStore",
    "MemoryStore",
    "RedisStore",
]
