"""Caching primitives: memoizing wrapper, invalidation, and key helpers."""

from .decorator import cached, memoize
from .invalidation import invalidate
from .keys import CacheKeyError, build_cache_key, entry_key
from .protocol import CacheStore

__all__ = [
    "memoize",
    "cached",
    "invalidate",
    "build_cache_key",
    "entry_key",
    "CacheKeyError",
    "CacheStore",
]
