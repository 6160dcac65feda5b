"""Configuration module.

This module provides:
- Settings management with environment variables
- The process-wide async Redis client
"""

from .redis import close_redis, get_redis, init_redis
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Redis
    "init_redis",
    "get_redis",
    "close_redis",
]
