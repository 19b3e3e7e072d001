"""
Error types raised by the cache.
Why: callers catch one base class; misuse stays distinguishable from bad config.
"""


class CacheError(Exception):
    """Base class for cache errors."""


class InvalidConfiguration(CacheError, ValueError):
    """Cache expiration period is negative or not an integer."""


class MissingEntry(CacheError, KeyError):
    """`get` was called for a key that was never written."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No cache entry for key {self.key!r}; check is_valid() first"
