"""Settings for the store adapters.

Loaded from environment variables prefixed with ``CACHEX_`` (or a local
.env file):
    from cachex.config.settings import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Redis connection settings used by ``init_redis`` and ``RedisStore``."""

    model_config = SettingsConfigDict(
        env_prefix="CACHEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Redis ====================
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL"
    )
    redis_protocol: int = Field(
        default=3,
        description="RESP protocol version (2 or 3)"
    )
    redis_socket_timeout: Optional[float] = Field(
        default=None,
        description="Socket timeout in seconds; unset means no timeout",
        gt=0,
    )

    @field_validator('redis_protocol')
    @classmethod
    def check_protocol(cls, v):
        if v not in (2, 3):
            raise ValueError("redis_protocol must be 2 or 3")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
