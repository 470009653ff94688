"""Inspectable memoized functions.

- MemoizedFunction: unbounded keyed cache with hit/miss statistics
- ExpiringMemoizedFunction: adds entry expiration and an LRU size bound

Both compute outside their lock and publish with first-writer-wins semantics,
so a slow computation never blocks lookups of other keys and a recursive
function may call its own memoized wrapper.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Generic, TypeVar

from ..config import get_settings

K = TypeVar("K")
R = TypeVar("R")

logger = logging.getLogger("verdict.memo")


class _StatsMixin:
    """Hit/miss counters guarded by the owner's lock."""

    _lock: threading.RLock
    _hits: int
    _misses: int

    @property
    def hit_count(self) -> int:
        return self._hits

    @property
    def miss_count(self) -> int:
        return self._misses

    @property
    def total_accesses(self) -> int:
        with self._lock:
            return self._hits + self._misses

    @property
    def hit_ratio(self) -> float:
        """Hits as a percentage of all accesses, 0.0 before the first access."""
        with self._lock:
            total = self._hits + self._misses
            return self._hits / total * 100 if total else 0.0

    def stats(self) -> dict[str, object]:
        """Cache statistics for monitoring."""
        with self._lock:
            total = self._hits + self._misses
            return {
                "hits": self._hits,
                "misses": self._misses,
                "total_accesses": total,
                "hit_ratio": self._hits / total * 100 if total else 0.0,
                "cache_size": len(self._cache),  # type: ignore[attr-defined]
            }


class MemoizedFunction(_StatsMixin, Generic[K, R]):
    """Thread-safe keyed cache around a single-argument function.

    Keys compare by structural equality (``==``/``hash``); pass tuples for
    multi-argument functions.

    Example:
        >>> square = MemoizedFunction(lambda n: n * n)
        >>> square(4), square(4), square.hit_count, square.miss_count
        (16, 16, 1, 1)
    """

    __slots__ = ("_function", "_cache", "_lock", "_hits", "_misses")

    def __init__(self, function: Callable[[K], R]) -> None:
        if function is None:
            raise TypeError("function must not be None")
        self._function = function
        self._cache: dict[K, R] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def invoke(self, key: K) -> R:
        """Return the cached result for key, computing it on a miss."""
        with self._lock:
            if key in self._cache:
                self._hits += 1
                return self._cache[key]
            self._misses += 1
        result = self._function(key)
        with self._lock:
            return self._cache.setdefault(key, result)

    __call__ = invoke

    @property
    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        """Drop every cached result and reset statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def remove_from_cache(self, key: K) -> bool:
        """Remove key; True if it was cached."""
        with self._lock:
            return self._cache.pop(key, _MISSING) is not _MISSING

    def contains_key(self, key: K) -> bool:
        with self._lock:
            return key in self._cache

    def __repr__(self) -> str:
        return f"MemoizedFunction(size={len(self._cache)}, hits={self._hits}, misses={self._misses})"


_MISSING = object()


@dataclass(slots=True)
class CacheEntry:
    """A cached result with creation and last-access timestamps."""
    value: object
    created_at: float
    last_accessed: float


class ExpiringMemoizedFunction(_StatsMixin, Generic[K, R]):
    """Memoized function with optional expiration and LRU size bound.

    - A cached entry older than ``expiration`` is evicted and recomputed.
    - Hits refresh the entry's last-access time (and LRU position).
    - Expired entries are swept in one batch at most once per
      ``cleanup_interval`` seconds (default from MemoizationSettings).
    - When an insert pushes the cache past ``max_cache_size``, the least
      recently accessed entries are evicted until it is back at the limit.

    Args:
        function: Function to memoize
        max_cache_size: Maximum number of entries (None = unbounded)
        expiration: Entry lifetime as timedelta or seconds (None = never)
        cleanup_interval: Minimum seconds between expiration sweeps
        clock: Monotonic time source in seconds

    Example:
        >>> fetch = ExpiringMemoizedFunction(load_user, max_cache_size=100, expiration=timedelta(minutes=5))
        >>> fetch(42)
    """

    __slots__ = (
        "_function", "_cache", "_lock", "_hits", "_misses",
        "_max_cache_size", "_expiration", "_cleanup_interval", "_clock", "_last_cleanup",
    )

    def __init__(
        self,
        function: Callable[[K], R],
        max_cache_size: int | None = None,
        expiration: timedelta | float | None = None,
        *,
        cleanup_interval: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if function is None:
            raise TypeError("function must not be None")
        if max_cache_size is not None and max_cache_size < 1:
            raise ValueError(f"max_cache_size must be positive, got {max_cache_size}")
        if isinstance(expiration, timedelta):
            expiration = expiration.total_seconds()
        if expiration is not None and expiration <= 0:
            raise ValueError(f"expiration must be positive, got {expiration}")

        self._function = function
        self._cache: OrderedDict[K, CacheEntry] = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._max_cache_size = max_cache_size
        self._expiration: float | None = expiration
        self._cleanup_interval = (
            cleanup_interval if cleanup_interval is not None else get_settings().memo.cleanup_interval
        )
        self._clock = clock
        self._last_cleanup = clock()

    @property
    def max_cache_size(self) -> int | None:
        return self._max_cache_size

    @property
    def expiration(self) -> timedelta | None:
        return timedelta(seconds=self._expiration) if self._expiration is not None else None

    def invoke(self, key: K) -> R:
        """Return a fresh cached result for key, computing and inserting on a miss."""
        self._cleanup_if_needed()

        with self._lock:
            entry = self._cache.get(key)
            if entry is not None:
                now = self._clock()
                if not self._is_expired(entry, now):
                    entry.last_accessed = now
                    self._cache.move_to_end(key)
                    self._hits += 1
                    return entry.value  # type: ignore[return-value]
                del self._cache[key]
            self._misses += 1

        result = self._function(key)

        with self._lock:
            now = self._clock()
            published = self._cache.get(key)
            if published is not None and not self._is_expired(published, now):
                return published.value  # type: ignore[return-value]
            self._cache[key] = CacheEntry(result, now, now)
            self._cache.move_to_end(key)
            self._enforce_size_limit()
        return result

    __call__ = invoke

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return self._expiration is not None and now - entry.created_at > self._expiration

    def _cleanup_if_needed(self) -> None:
        """Sweep expired entries, at most once per cleanup interval."""
        if self._expiration is None:
            return
        now = self._clock()
        if now - self._last_cleanup < self._cleanup_interval:
            return
        with self._lock:
            if now - self._last_cleanup < self._cleanup_interval:
                return
            expired = [k for k, e in self._cache.items() if self._is_expired(e, now)]
            for key in expired:
                del self._cache[key]
            self._last_cleanup = now
        if expired:
            logger.debug(f"Swept {len(expired)} expired cache entries")

    def _enforce_size_limit(self) -> None:
        """Evict least recently accessed entries. Caller must hold lock."""
        if self._max_cache_size is None:
            return
        overflow = len(self._cache) - self._max_cache_size
        for _ in range(overflow):
            key, _entry = self._cache.popitem(last=False)
            logger.debug(f"Evicted least recently used cache entry {key!r}")

    @property
    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        """Drop every cached result and reset statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def remove_from_cache(self, key: K) -> bool:
        with self._lock:
            return self._cache.pop(key, None) is not None

    def contains_key(self, key: K) -> bool:
        """True if key is cached and not expired."""
        with self._lock:
            entry = self._cache.get(key)
            return entry is not None and not self._is_expired(entry, self._clock())

    def __repr__(self) -> str:
        return (
            f"ExpiringMemoizedFunction(size={len(self._cache)}, max={self._max_cache_size}, "
            f"expiration={self._expiration})"
        )
