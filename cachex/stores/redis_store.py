"""Redis-backed store.

Values are stored as plain JSON encoded with orjson. Pydantic models are
dumped to their JSON form; reads return plain JSON types (dict, list, str,
int, float, bool), never the original model class.
"""

from __future__ import annotations

from typing import Any, Optional

import orjson
from pydantic import BaseModel
from redis.asyncio import Redis

from cachex.config.redis import get_redis
from cachex.logging_config import get_logger

logger = get_logger(name=__name__)


class RedisStore:
    """``CacheStore`` over ``redis.asyncio``.

    Args:
        client: Redis client to use. When omitted, the process-wide client
            from ``cachex.config.redis`` is resolved on every call, so
            ``init_redis()`` may run after the store is constructed.
    """

    def __init__(self, client: Optional[Redis] = None) -> None:
        self._client = client

    @property
    def client(self) -> Redis:
        if self._client is not None:
            return self._client
        return get_redis()

    async def get(self, key: str) -> Any | None:
        raw = await self.client.get(key)
        if raw is None:
            return None
        return orjson.loads(raw)

    async def set(self, key: str, value: Any, expire: int) -> None:
        await self.client.set(key, encode(value), ex=expire)

    async def delete(self, key: str) -> None:
        deleted = await self.client.delete(key)
        if not deleted:
            logger.debug("Redis DEL found no key {}", key)


def encode(value: Any) -> bytes:
    """Encode a value as JSON bytes. Raises TypeError for unsupported types."""
    return orjson.dumps(value, default=_default)


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Type {type(obj).__name__} is not JSON serializable")
