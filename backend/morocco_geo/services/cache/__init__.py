"""Cache service module.

Provides the in-memory TTL cache used to memoize lookup results.
"""

from .service import (
    MISSING,
    CacheEntry,
    CacheService,
    InMemoryCacheService,
)

__all__ = [
    "MISSING",
    "CacheEntry",
    "CacheService",
    "InMemoryCacheService",
]
