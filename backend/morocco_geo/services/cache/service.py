"""Cache service implementation.

This module provides an abstract cache service interface and a concrete
in-memory implementation with per-entry TTL and lazy expiry.

Expiry is checked on access: an expired entry is evicted by the ``get`` or
``has`` that observes it. ``cleanup_expired`` is an explicit O(n)
compaction hook and never runs on its own.

Cache Key Consistency:
- Two equivalent queries (same operation, same normalized arguments) SHALL
  produce byte-identical keys, built with ``CacheService.build_key``.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from morocco_geo.config import ConfigProvider
from morocco_geo.models import CacheStats

logger = logging.getLogger(__name__)

T = TypeVar("T")

KEY_DELIMITER = ":"


class _Missing:
    """Marker for "no cached value", distinct from a cached None."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class CacheEntry(Generic[T]):
    """A stored value and the monotonic time (ms) after which it is stale."""
    value: T
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class CacheService(ABC):
    """Abstract base class for cache services.

    Defines the interface for caching operations including get, set,
    presence checks and invalidation. Also provides a static method for
    building consistent cache keys.
    """

    @abstractmethod
    def get(self, key: str) -> Any:
        """Retrieve cached value by key.

        Args:
            key: The cache key to look up.

        Returns:
            The cached value if present and fresh, ``MISSING`` otherwise.
            A cached ``None`` is returned as ``None``.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        """Store value in cache with optional TTL.

        Args:
            key: The cache key to store under.
            value: The value to cache.
            ttl_ms: Time-to-live in milliseconds. Uses the configured default
                if not specified.
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a fresh entry exists for key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a specific key from the cache.

        Returns:
            True if the key was deleted, False if it didn't exist.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        pass

    @abstractmethod
    def cleanup_expired(self) -> int:
        """Evict every expired entry.

        Returns:
            Number of entries evicted.
        """
        pass

    @abstractmethod
    def stats(self) -> CacheStats:
        pass

    @staticmethod
    def build_key(*parts: str | int) -> str:
        """Generate a cache key from ordered parts.

        Parts are joined with ``:``. Callers must normalize (lower-case,
        strip) any part that could vary in case or contain the delimiter.

        Example:
            >>> CacheService.build_key("a", 1, "b")
            'a:1:b'
        """
        return KEY_DELIMITER.join(str(part) for part in parts)


class InMemoryCacheService(CacheService):
    """Process-local cache backed by a dict guarded by a single lock.

    Reads ``enable_caching`` and ``cache_timeout`` from the config provider
    on every operation. With caching disabled, ``get``/``has`` behave as if
    the store were empty and ``set`` does nothing.

    Attributes:
        _entries: Key to CacheEntry mapping.
        _clock: Returns the current time in milliseconds (monotonic by default).
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self._config = config_provider
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._lock = threading.Lock()

    def _now_ms(self) -> float:
        return self._clock()

    def _fresh_entry(self, key: str) -> CacheEntry[Any] | None:
        # Caller holds the lock.
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._now_ms()):
            del self._entries[key]
            logger.debug(f"[CACHE] Evicted expired key {key}")
            return None
        return entry

    def get(self, key: str) -> Any:
        if not self._config.get().enable_caching:
            return MISSING
        with self._lock:
            entry = self._fresh_entry(key)
        return MISSING if entry is None else entry.value

    def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        config = self._config.get()
        if not config.enable_caching:
            return
        ttl = ttl_ms if ttl_ms is not None else config.cache_timeout
        with self._lock:
            self._entries[key] = CacheEntry(value=value, expires_at=self._now_ms() + ttl)

    def has(self, key: str) -> bool:
        if not self._config.get().enable_caching:
            return False
        with self._lock:
            return self._fresh_entry(key) is not None

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def cleanup_expired(self) -> int:
        with self._lock:
            now = self._now_ms()
            expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info(f"[CACHE] Cleaned up {len(expired)} expired entries")
        return len(expired)

    def stats(self) -> CacheStats:
        config = self._config.get()
        with self._lock:
            keys = list(self._entries)
        return CacheStats(
            size=len(keys),
            keys=keys,
            is_enabled=config.enable_caching,
            default_ttl=config.cache_timeout,
        )
