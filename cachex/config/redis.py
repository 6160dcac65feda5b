"""Redis async connection management.

Provides a process-wide async Redis client for ``RedisStore`` via redis-py
with the hiredis parser.
"""

from typing import Optional

from redis.asyncio import Redis

from cachex.logging_config import get_logger

from .settings import get_settings

logger = get_logger(name=__name__)

_client: Redis | None = None


async def init_redis(url: Optional[str] = None) -> Redis:
    """Initialize the global async Redis client and verify connectivity.

    Args:
        url: Redis connection URL (e.g., redis://localhost:6379). Defaults to
            ``CACHEX_REDIS_URL``.
    """
    global _client
    settings = get_settings()
    url = url or settings.redis_url
    _client = Redis.from_url(
        url,
        decode_responses=True,
        protocol=settings.redis_protocol,
        socket_timeout=settings.redis_socket_timeout,
    )
    await _client.ping()
    logger.info("Redis client initialized and connected: {}", url)
    return _client


def get_redis() -> Redis:
    """Get the global async Redis client. Raises if not initialized."""
    if _client is None:
        raise RuntimeError(
            "Redis client not initialized. Call init_redis() first."
        )
    return _client


async def close_redis() -> None:
    """Close the Redis client connection."""
    global _client
    if _client is not None:
        await _client.aclose()
        logger.info("Redis client closed")
    _client = None
