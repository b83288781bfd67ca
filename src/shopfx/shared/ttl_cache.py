# src/shopfx/shared/ttl_cache.py
"""
TTL Cache - Time-bounded In-memory Cache

This module implements a small key -> value cache where each entry carries
its own expiry. The clock is injectable so tests can advance time and force
expiry deterministically instead of sleeping.

Writes always replace the existing entry (last write wins). The cache is
shared between the event loop and executor threads; removing an expired
entry never drops a value written after it was read.

Files that USE this module:
- shopfx.application.rates_service (RateTableProvider caches the rate table)

Files that this module USES:
- None (pure utility implementation)
"""
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional


@dataclass(frozen=True)
class _CacheEntry:
    value: Any
    expires_at: float


class TTLCache:
    """In-memory cache with per-entry expiry."""

    def __init__(self, ttl_seconds: float, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            ttl_seconds: Default lifetime of an entry
            clock: Callable returning the current time in seconds
                   (defaults to time.monotonic)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock or time.monotonic
        self._entries: Dict[Hashable, _CacheEntry] = {}
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Return the cached value for key, or None if absent or expired.

        Expired entries are dropped on access.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.now() >= entry.expires_at:
            with self._lock:
                # A writer may have replaced the entry since it was read
                if self._entries.get(key) is entry:
                    del self._entries[key]
            return None
        return entry.value

    def set(self, key: Hashable, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """Store value under key, replacing any existing entry."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        entry = _CacheEntry(value=value, expires_at=self.now() + ttl)
        with self._lock:
            self._entries[key] = entry

    def expires_at(self, key: Hashable) -> Optional[float]:
        """Expiry timestamp of a live entry, or None."""
        if self.get(key) is None:
            return None
        return self._entries[key].expires_at

    def invalidate(self, key: Hashable) -> bool:
        """Drop an entry. Returns True if one was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None
