"""Thread-safe, time-expiring in-memory cache."""

from .core.cache import CacheEntry, ExpiringCache
from .core.errors import CacheError, InvalidConfiguration, MissingEntry
from .loader import invalidate, load_through

__all__ = [
    "CacheEntry",
    "CacheError",
    "ExpiringCache",
    "InvalidConfiguration",
    "MissingEntry",
    "invalidate",
    "load_through",
]
