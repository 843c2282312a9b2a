"""Core data models for Morocco Geo.

This module contains the Pydantic models used throughout the package for
representing regions, cities, lookup results and cache statistics.

Region and City records are loaded once from the bundled dataset and never
mutated afterwards, so they are declared frozen.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """Languages the dataset carries names for."""

    ENGLISH = "english"
    FRENCH = "french"
    ARABIC = "arabic"


class LocalizedNames(BaseModel):
    """A name expressed in every supported language."""

    model_config = ConfigDict(frozen=True)

    english: str = Field(..., min_length=1)
    french: str = Field(..., min_length=1)
    arabic: str = Field(..., min_length=1)

    def get(self, language: Language) -> str:
        return getattr(self, Language(language).value)


class City(BaseModel):
    """A city record from the dataset."""

    model_config = ConfigDict(frozen=True)

    city_id: int = Field(..., gt=0, description="Unique positive city identifier")
    names: LocalizedNames

    def name(self, language: Language) -> str:
        return self.names.get(language)


class Region(BaseModel):
    """A region record with the cities assigned to it.

    A city listed here belongs to this region only; unassigned cities are
    kept in a separate flat collection by the dataset.
    """

    model_config = ConfigDict(frozen=True)

    region_id: str = Field(..., min_length=1, description="Opaque unique identifier (UUID)")
    names: LocalizedNames
    cities: tuple[City, ...] = ()

    def name(self, language: Language) -> str:
        return self.names.get(language)


class RegionSummary(BaseModel):
    """A region resolved to a single language."""

    model_config = ConfigDict(frozen=True)

    region_id: str
    region_name: str


class CityDetails(BaseModel):
    """Result of a city point-lookup.

    ``region_id`` and ``region_name`` are None for unassigned cities.
    """

    model_config = ConfigDict(frozen=True)

    city_id: int
    city_name: str
    region_id: Optional[str] = None
    region_name: Optional[str] = None
    is_assigned: bool


class CacheStats(BaseModel):
    """Point-in-time snapshot of the cache store."""

    size: int = Field(..., ge=0)
    keys: list[str] = Field(default_factory=list)
    is_enabled: bool
    default_ttl: int = Field(..., ge=0, description="Default TTL in milliseconds")


class DataIntegrityResult(BaseModel):
    """Outcome of a structural check of the raw dataset."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class DataStatistics(BaseModel):
    """Counts derived from the dataset."""

    regions_count: int
    assigned_cities_count: int
    unassigned_cities_count: int
    total_cities_count: int
    average_cities_per_region: float


class DataHealthReport(BaseModel):
    """Combined integrity, statistics and completeness report."""

    is_healthy: bool
    integrity: DataIntegrityResult
    statistics: DataStatistics
    is_complete: bool
    recommendations: list[str] = Field(default_factory=list)
