"""
Thread-safe, time-based in-memory cache.
Why: skip repeated expensive loads (e.g. configuration) for a fixed period.

Usage follows a two-step protocol: check `is_valid(key)` and only then call
`get(key)`. The two calls are not atomic; another thread may overwrite the
key in between. `get_if_valid` does both under one lock when that matters.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, TypeVar, Union

from .errors import InvalidConfiguration, MissingEntry
from .logging import get_logger
from .metrics import CacheMetrics

_LOG = get_logger(__name__)

V = TypeVar("V")
D = TypeVar("D")

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    written_at: float
    value: Optional[V]


class ExpiringCache(Generic[V]):
    """Single-TTL cache keyed by string. Stale entries stay until overwritten."""

    def __init__(self, expire_seconds: int, *, clock: Clock = time.monotonic) -> None:
        if isinstance(expire_seconds, bool) or not isinstance(expire_seconds, int):
            raise InvalidConfiguration(
                f"Cache expiration period must be an integer, got {expire_seconds!r}"
            )
        if expire_seconds < 0:
            raise InvalidConfiguration("Cache expiration period cannot be negative")
        self._expire_seconds = expire_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()
        self._metrics = CacheMetrics()
        _LOG.debug(f"creating ExpiringCache with expiration of {expire_seconds} seconds")

    @property
    def expire_seconds(self) -> int:
        return self._expire_seconds

    @property
    def metrics(self) -> CacheMetrics:
        return self._metrics

    def is_enabled(self) -> bool:
        """True when the expiration period is positive; 0 disables caching."""
        return self._expire_seconds > 0

    def _fresh(self, entry: Optional[CacheEntry[V]]) -> bool:
        return entry is not None and self._clock() - entry.written_at < self._expire_seconds

    def _record_lookup(self, entry: Optional[CacheEntry[V]], valid: bool) -> None:
        # a None value is an invalidation marker, so it never counts as a hit
        if valid and entry is not None and entry.value is not None:
            self._metrics.record_hit()
        else:
            self._metrics.record_miss()

    def is_valid(self, key: str) -> bool:
        """Check whether `key` has an entry that has not yet expired.

        The answer holds only at the moment of the call.
        """
        with self._lock:
            entry = self._entries.get(key)
        valid = self._fresh(entry)
        self._record_lookup(entry, valid)
        return valid

    def get(self, key: str) -> Optional[V]:
        """Return the stored value whether or not it has expired.

        Call `is_valid` first. A key that was never written raises
        `MissingEntry`.
        """
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            _LOG.warning("get() called for missing cache key", extra={"cache_key": key})
            raise MissingEntry(key)
        return entry.value

    def set(self, key: str, value: Optional[V]) -> None:
        """Store `value` stamped with the current time, replacing any prior entry.

        Setting None invalidates the key for callers; the entry itself still
        counts as valid until it ages out.
        """
        entry = CacheEntry(written_at=self._clock(), value=value)
        with self._lock:
            self._entries[key] = entry
        self._metrics.record_write()

    def get_if_valid(self, key: str, default: Optional[D] = None) -> Union[V, D, None]:
        """Atomic `is_valid` + `get`: the value if still fresh, else `default`."""
        with self._lock:
            entry = self._entries.get(key)
            valid = self._fresh(entry)
        self._record_lookup(entry, valid)
        if not valid:
            return default
        return entry.value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"ExpiringCache(expire_seconds={self._expire_seconds}, entries={len(self)})"
