"""Morocco Geo Services.

Service layer components:
- Cache: in-memory TTL cache with lazy expiry
- Lookup: cached region/city lookups, search and random sampling
"""

from .cache import MISSING, CacheEntry, CacheService, InMemoryCacheService
from .lookup import LookupService, create_lookup_service, sample_without_replacement

__all__ = [
    # Cache
    "MISSING",
    "CacheEntry",
    "CacheService",
    "InMemoryCacheService",
    # Lookup
    "LookupService",
    "create_lookup_service",
    "sample_without_replacement",
]
