"""Memoizing wrapper for async operations.

Usage:
    from cachex import cached, memoize

    fetch_profile = memoize(store, "user", "fetchProfile", load_profile, 60)
    profile = await fetch_profile("42")

    @cached(store, prefix="user", expire=60)
    async def fetch_orders(user_id: str, page: int):
        ...
"""

from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

from cachex.logging_config import get_logger

from .keys import build_cache_key
from .protocol import CacheStore

logger = get_logger(name=__name__)

T = TypeVar("T")


def memoize(
    store: CacheStore,
    prefix: str,
    name: str,
    operation: Callable[..., Awaitable[T]],
    expire: int,
    *,
    strict_keys: bool = True,
    strict_presence: bool = False,
) -> Callable[..., Awaitable[T]]:
    """Wrap an async operation so its results are read from and written to ``store``.

    Args:
        store: Backend implementing get/set/delete (see ``CacheStore``)
        prefix: Key namespace (e.g., "user")
        name: Logical operation name, used only in the key
        operation: The coroutine function to wrap
        expire: Expiration in seconds, passed unchanged to ``store.set``
        strict_keys: Reject composite positional arguments with ``CacheKeyError``
        strict_presence: Treat only ``None`` as a miss and cache every
            non-None result. Off by default, in which case falsy values
            (``0``, ``""``, ``False``, empty containers) are indistinguishable
            from a miss and are never written.

    Notes:
        - Only positional arguments take part in the key; the wrapper does
          not accept keyword arguments.
        - Store failures are not swallowed. A failed read skips the
          operation, a failed write fails the call after the operation ran.
        - No locking: concurrent misses for the same key each invoke
          ``operation`` and each write the store.
    """
    if not isinstance(expire, int) or isinstance(expire, bool):
        raise TypeError(f"expire must be an integer number of seconds, got {expire!r}")

    is_present = _is_not_none if strict_presence else bool

    @functools.wraps(operation)
    async def wrapper(*args: Any) -> T:
        cache_key = build_cache_key(prefix, name, args, strict=strict_keys)

        result = await store.get(cache_key)
        if is_present(result):
            logger.debug("Cache HIT: {}", cache_key)
            return result

        logger.debug("Cache MISS: {}", cache_key)
        result = await operation(*args)

        if is_present(result):
            await store.set(cache_key, result, expire)
            logger.debug("Cache SET: {} (expire={}s)", cache_key, expire)
        else:
            logger.debug("Skipping cache write for {}: empty result", cache_key)

        return result

    wrapper._cache_prefix = prefix
    wrapper._cache_name = name
    wrapper._cache_ttl = expire
    wrapper._is_cached = True

    return wrapper


def cached(
    store: CacheStore,
    prefix: str,
    expire: int,
    name: Optional[str] = None,
    *,
    strict_keys: bool = True,
    strict_presence: bool = False,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator form of ``memoize``; ``name`` defaults to the function's ``__name__``."""
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        return memoize(
            store,
            prefix,
            name or func.__name__,
            func,
            expire,
            strict_keys=strict_keys,
            strict_presence=strict_presence,
        )
    return decorator


def _is_not_none(value: Any) -> bool:
    return value is not None
