"""Store adapters satisfying ``cachex.cache.CacheStore``."""

from .memory import MemoryStore
from .redis_store import RedisStore

__all__ = ["MemoryStore", "RedisStore"]
