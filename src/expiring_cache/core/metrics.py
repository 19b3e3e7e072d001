"""
In-memory hit/miss counters for a cache instance.
Why: quick visibility into whether the cache actually saves work.
"""

import threading
from typing import Dict, Union


def _ratio(hits: int, lookups: int) -> float:
    if not lookups:
        return 0.0
    return round(hits / lookups, 4)


class CacheMetrics:
    def __init__(self) -> None:
        self.hits = 0
        self.misses = 0
        self.writes = 0
        self._lock = threading.Lock()

    def record_hit(self) -> None:
        with self._lock:
            self.hits += 1

    def record_miss(self) -> None:
        with self._lock:
            self.misses += 1

    def record_write(self) -> None:
        with self._lock:
            self.writes += 1

    def snapshot(self) -> Dict[str, Union[int, float]]:
        with self._lock:
            hits, misses, writes = self.hits, self.misses, self.writes
        return {
            "hits": hits,
            "misses": misses,
            "writes": writes,
            "hit_ratio": _ratio(hits, hits + misses),
        }
