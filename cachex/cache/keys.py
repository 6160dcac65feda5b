"""Cache key construction.

Convention: {prefix}:{name}:{arg1}:{arg2}:...

Examples:
    user:fetchProfile:42
    stats:daily_totals:2024-05-01:eu-west
    user:listAll:              (no arguments, trailing separator kept)
"""

from datetime import date
from decimal import Decimal
from typing import Any, Sequence
from uuid import UUID

SEPARATOR = ":"

# Values whose string form is stable enough to live inside a key.
_SCALAR_TYPES = (str, int, float, Decimal, UUID, date)


class CacheKeyError(TypeError):
    """Raised when a cache-key argument is a composite value."""
    pass


def build_cache_key(
    prefix: str,
    name: str,
    args: Sequence[Any],
    strict: bool = True,
) -> str:
    """Build a deterministic store key from a prefix, an operation name and its arguments.

    Args:
        prefix: Namespace shared by related cached operations (e.g., "user")
        name: Logical operation name (e.g., "fetchProfile")
        args: Positional arguments, in call order
        strict: Reject composite arguments (lists, dicts, models, arbitrary
            objects) instead of stringifying them.

    Returns:
        Key string like "user:fetchProfile:42"

    Raises:
        CacheKeyError: In strict mode, if any argument is not a scalar.
    """
    render = _render_strict if strict else _render_lenient
    parts = [render(position, arg) for position, arg in enumerate(args)]
    return SEPARATOR.join([prefix, name, SEPARATOR.join(parts)])


def entry_key(prefix: str, key: str) -> str:
    """Return the full store key for a raw key fragment under a prefix.

    entry_key("user", "fetchProfile:42") -> "user:fetchProfile:42"
    """
    return f"{prefix}{SEPARATOR}{key}"


def _render_strict(position: int, arg: Any) -> str:
    if arg is None:
        return ""
    if not isinstance(arg, _SCALAR_TYPES):
        raise CacheKeyError(
            f"Cache key argument {position} has composite type "
            f"{type(arg).__name__!r}; only scalar values can be part of a key"
        )
    if isinstance(arg, date):
        return arg.isoformat()
    return str(arg)


def _render_lenient(position: int, arg: Any) -> str:
    if arg is None:
        return ""
    return str(arg)
