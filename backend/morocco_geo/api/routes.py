"""API routes for Morocco Geo.

Thin HTTP layer over LookupService. Every endpoint accepts an optional
``language`` query parameter; unsupported values fall back to the
configured default language.

Lookups that find nothing answer 404 with ``success=False`` and a
NOT_FOUND error in the usual response envelope. Invalid arguments raise
MoroccoGeoError, which the app's exception handler turns into a 400.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from morocco_geo.data import load_raw_data
from morocco_geo.models import (
    AppError,
    CacheStats,
    CityDetails,
    DataHealthReport,
    ErrorCode,
    RegionSummary,
)
from morocco_geo.services import LookupService, create_lookup_service
from morocco_geo.validation import perform_data_health_check

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_RANDOM_COUNT = 100


# Response models
class RegionListResponse(BaseModel):
    """Response model for region listings and searches."""
    success: bool = True
    regions: list[RegionSummary] = Field(default_factory=list)


class RegionResponse(BaseModel):
    """Response model for a single region lookup."""
    success: bool
    region: Optional[RegionSummary] = None
    error: Optional[AppError] = None


class CityListResponse(BaseModel):
    """Response model for city name listings and searches."""
    success: bool = True
    cities: list[str] = Field(default_factory=list)


class CityResponse(BaseModel):
    """Response model for a single city lookup."""
    success: bool
    city: Optional[CityDetails] = None
    error: Optional[AppError] = None


class CountResponse(BaseModel):
    """Response model for counts."""
    success: bool
    count: Optional[int] = None
    error: Optional[AppError] = None


class CacheCleanupResponse(BaseModel):
    success: bool = True
    removed: int = 0


# Service instances
_lookup_service: LookupService | None = None


def get_lookup_service() -> LookupService:
    global _lookup_service
    if _lookup_service is None:
        _lookup_service = create_lookup_service()
    return _lookup_service


def _not_found(what: str, name: str) -> AppError:
    return AppError(
        code=ErrorCode.NOT_FOUND,
        message=f"{what} not found: {name}",
        user_message=f"No {what.lower()} matches '{name}'.",
        value=name,
    )


# ─── Regions ───

@router.get("/regions", response_model=RegionListResponse)
def list_regions(
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> RegionListResponse:
    return RegionListResponse(regions=lookups.get_all_regions(language))


@router.get("/regions/search", response_model=RegionListResponse)
def search_regions(
    q: str = "",
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> RegionListResponse:
    """Case-insensitive substring search over region names."""
    return RegionListResponse(regions=lookups.search_regions(q, language))


@router.get("/regions/random", response_model=RegionListResponse)
def random_regions(
    count: int = Query(1, ge=0, le=MAX_RANDOM_COUNT),
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> RegionListResponse:
    return RegionListResponse(regions=lookups.random_regions(count, language))


@router.get("/regions/by-name/{name}", response_model=RegionResponse)
def get_region_by_name(
    name: str,
    response: Response,
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> RegionResponse:
    region = lookups.find_region_by_name(name, language)
    if region is None:
        response.status_code = status.HTTP_404_NOT_FOUND
        return RegionResponse(success=False, error=_not_found("Region", name))
    return RegionResponse(success=True, region=region)


@router.get("/regions/{region_id}/cities", response_model=CityListResponse)
def list_region_cities(
    region_id: str,
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> CityListResponse:
    return CityListResponse(cities=lookups.get_region_cities(region_id, language))


@router.get("/regions/{region_id}/cities/count", response_model=CountResponse)
def count_region_cities(
    region_id: str,
    lookups: LookupService = Depends(get_lookup_service),
) -> CountResponse:
    """Raises InvalidRegionIdError (400) for an unknown region."""
    return CountResponse(success=True, count=lookups.count_cities_in_region(region_id))


# ─── Cities ───

@router.get("/cities", response_model=CityListResponse)
def list_cities(
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> CityListResponse:
    """All city names, deduplicated and sorted."""
    return CityListResponse(cities=lookups.list_all_cities(language))


@router.get("/cities/search", response_model=CityListResponse)
def search_cities(
    q: str = "",
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> CityListResponse:
    return CityListResponse(cities=lookups.search_cities(q, language))


@router.get("/cities/random", response_model=CityListResponse)
def random_cities(
    count: int = Query(1, ge=0, le=MAX_RANDOM_COUNT),
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> CityListResponse:
    return CityListResponse(cities=lookups.random_cities(count, language))


@router.get("/cities/{name}", response_model=CityResponse)
def get_city_details(
    name: str,
    response: Response,
    language: Optional[str] = None,
    lookups: LookupService = Depends(get_lookup_service),
) -> CityResponse:
    city = lookups.find_city_details(name, language)
    if city is None:
        response.status_code = status.HTTP_404_NOT_FOUND
        return CityResponse(success=False, error=_not_found("City", name))
    return CityResponse(success=True, city=city)


# ─── Cache & data maintenance ───

@router.get("/cache/stats", response_model=CacheStats)
def cache_stats(lookups: LookupService = Depends(get_lookup_service)) -> CacheStats:
    return lookups.cache.stats()


@router.delete("/cache", response_model=CacheStats)
def clear_cache(lookups: LookupService = Depends(get_lookup_service)) -> CacheStats:
    lookups.cache.clear()
    logger.info("[API] Cache cleared")
    return lookups.cache.stats()


@router.post("/cache/cleanup", response_model=CacheCleanupResponse)
def cleanup_cache(lookups: LookupService = Depends(get_lookup_service)) -> CacheCleanupResponse:
    return CacheCleanupResponse(removed=lookups.cache.cleanup_expired())


@router.get("/data/health", response_model=DataHealthReport)
def data_health(lookups: LookupService = Depends(get_lookup_service)) -> DataHealthReport:
    return perform_data_health_check(load_raw_data(), lookups.dataset)
