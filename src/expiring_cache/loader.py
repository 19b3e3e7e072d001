"""Load-through helpers for callers that treat the cache as an optimization."""
import logging
from typing import Callable, TypeVar

from expiring_cache.core.cache import ExpiringCache

logger = logging.getLogger(__name__)

V = TypeVar("V")


def load_through(cache: ExpiringCache[V], key: str, load: Callable[[], V]) -> V:
    """Return the cached value for `key`, calling `load` when it is missing or stale.

    A disabled cache is bypassed entirely. A cached None counts as
    invalidated and triggers a reload. Errors from `load` propagate and
    nothing is stored.
    """
    if not cache.is_enabled():
        return load()

    cached = cache.get_if_valid(key)
    if cached is not None:
        return cached

    logger.debug("Refreshing cache entry", extra={"cache_key": key})
    value = load()
    cache.set(key, value)
    return value


def invalidate(cache: ExpiringCache[V], key: str) -> None:
    """Mark `key` as needing a reload on next access."""
    cache.set(key, None)
