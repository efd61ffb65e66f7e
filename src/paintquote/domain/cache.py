"""TTL memoization cache shared by the estimation services.

A cache instance is owned by whoever drives a calculation (a request, a CLI
run, a session) and passed to the services that memoize. Entries expire after
a fixed TTL; storing a value sweeps out expired entries at most once per TTL
period. A miss only costs a recomputation.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 60.0


@dataclass
class CacheEntry:
    timestamp: float
    value: Any


class CalculationCache:
    """Thread-safe TTL cache keyed by hashable tuples."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = float(ttl_seconds)
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return (now - entry.timestamp) >= self.ttl_seconds

    def _sweep(self, now: float) -> int:
        expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
        for key in expired:
            del self._entries[key]
        self._last_sweep = now
        if expired:
            logger.debug(f"Evicted {len(expired)} expired cache entries")
        return len(expired)

    def get(self, key: Hashable) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                self._entries.pop(key, None)
                return None
            return entry.value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            now = self._clock()
            if now - self._last_sweep >= self.ttl_seconds:
                self._sweep(now)
            self._entries[key] = CacheEntry(now, value)

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the cached value for ``key`` or compute and store it."""
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key!r}")
            return cached
        value = compute()
        self.set(key, value)
        return value

    def purge_expired(self) -> int:
        """Drop every expired entry now; returns how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
