"""Morocco Geo.

Language-aware lookups over Moroccan regions and cities (English, French,
Arabic), memoized by an in-process TTL cache.

Example:
    >>> from morocco_geo import create_lookup_service
    >>> lookups = create_lookup_service()
    >>> lookups.search_cities("casa", "english")
    ['Casablanca']
"""

from .config import ConfigProvider, PackageConfig, get_config_provider
from .data import Dataset, get_dataset, load_dataset
from .models import (
    CacheStats,
    City,
    CityDetails,
    InvalidLanguageError,
    InvalidRegionIdError,
    Language,
    MoroccoGeoError,
    Region,
    RegionSummary,
)
from .services import (
    MISSING,
    CacheService,
    InMemoryCacheService,
    LookupService,
    create_lookup_service,
)
from .utils import create_cache_key, memoize, memoized

__version__ = "2.0.0"

__all__ = [
    "CacheService",
    "CacheStats",
    "City",
    "CityDetails",
    "ConfigProvider",
    "Dataset",
    "InMemoryCacheService",
    "InvalidLanguageError",
    "InvalidRegionIdError",
    "Language",
    "LookupService",
    "MISSING",
    "MoroccoGeoError",
    "PackageConfig",
    "Region",
    "RegionSummary",
    "create_cache_key",
    "create_lookup_service",
    "get_config_provider",
    "get_dataset",
    "load_dataset",
    "memoize",
    "memoized",
]
