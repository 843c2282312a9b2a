"""Morocco Geo models."""

from .core import (
    CacheStats,
    City,
    CityDetails,
    DataHealthReport,
    DataIntegrityResult,
    DataStatistics,
    Language,
    LocalizedNames,
    Region,
    RegionSummary,
)
from .errors import (
    AppError,
    ConfigError,
    DataIntegrityError,
    ErrorCode,
    InvalidCityIdError,
    InvalidLanguageError,
    InvalidRegionIdError,
    MoroccoGeoError,
)

__all__ = [
    # Core
    "CacheStats",
    "City",
    "CityDetails",
    "DataHealthReport",
    "DataIntegrityResult",
    "DataStatistics",
    "Language",
    "LocalizedNames",
    "Region",
    "RegionSummary",
    # Errors
    "AppError",
    "ConfigError",
    "DataIntegrityError",
    "ErrorCode",
    "InvalidCityIdError",
    "InvalidLanguageError",
    "InvalidRegionIdError",
    "MoroccoGeoError",
]
