"""Generic LRU cache with TTL and statistics.

Backs the generation cache: keys are hashed with xxhash, entries expire after
``ttl_seconds`` and the least recently used entry is evicted at ``max_size``.
All operations hold one lock, so a shared generator may export from several
threads.
"""

import threading
import time
from typing import Generic, TypeVar, Any
from collections import OrderedDict
from dataclasses import dataclass

from .hash import hash_string, Algorithm

T = TypeVar("T")


@dataclass
class Stats:
    """Cache statistics."""

    size: int = 0
    max_size: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Hit rate (0.0 to 1.0)."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
        }


class LRUCache(Generic[T]):
    """
    LRU cache with optional TTL.

    Examples:
        >>> cache = LRUCache[str](max_size=2)
        >>> cache.set("key", "value")
        >>> cache.get("key")
        'value'
    """

    def __init__(self, max_size: int = 32, ttl_seconds: int | None = None):
        if max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._entries: OrderedDict[str, tuple[T, float]] = OrderedDict()
        self._stats = Stats(max_size=max_size)
        self._lock = threading.Lock()

    @staticmethod
    def _key(key: str) -> str:
        return hash_string(key, Algorithm.XXHASH64)

    def _expired(self, stored_at: float) -> bool:
        return self.ttl_seconds is not None and time.monotonic() - stored_at >= self.ttl_seconds

    def get(self, key: str) -> T | None:
        """Get cached value, or None if missing or expired."""
        cache_key = self._key(key)
        with self._lock:
            entry = self._entries.get(cache_key)
            if entry is None:
                self._stats.misses += 1
                return None

            value, stored_at = entry
            if self._expired(stored_at):
                del self._entries[cache_key]
                self._stats.size = len(self._entries)
                self._stats.misses += 1
                return None

            self._entries.move_to_end(cache_key)
            self._stats.hits += 1
            return value

    def set(self, key: str, value: T) -> None:
        """Store value, evicting the least recently used entry when full."""
        cache_key = self._key(key)
        with self._lock:
            self._entries.pop(cache_key, None)
            self._entries[cache_key] = (value, time.monotonic())

            if len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
                self._stats.evictions += 1

            self._stats.size = len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._stats.size = 0

    @property
    def stats(self) -> Stats:
        return self._stats

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self._key(key) in self._entries


__all__ = ["LRUCache", "Stats"]
