"""Structural checks and statistics for the regions dataset.

The integrity check works on the raw JSON dicts so that it can report
problems the models would otherwise reject at load time.
"""

import logging
from typing import TYPE_CHECKING, Any

from morocco_geo.models import (
    DataHealthReport,
    DataIntegrityError,
    DataIntegrityResult,
    DataStatistics,
)

if TYPE_CHECKING:
    from morocco_geo.data import Dataset

logger = logging.getLogger(__name__)

REGION_NAME_FIELDS = ("region_english", "region_french", "region_arabic")
CITY_NAME_FIELDS = ("city_english", "city_french", "city_arabic")

MIN_REGIONS = 10
MIN_TOTAL_CITIES = 50
MIN_AVERAGE_CITIES = 1
LOW_AVERAGE_CITIES = 5
UNASSIGNED_RATIO_THRESHOLD = 0.1


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _is_city_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _check_city(city: Any, label: str, errors: list[str]) -> None:
    if not isinstance(city, dict):
        errors.append(f"{label} is not an object")
        return
    if not _is_city_id(city.get("city_id")):
        errors.append(f"{label} is missing or has invalid city_id")
    for field_name in CITY_NAME_FIELDS:
        if not _is_text(city.get(field_name)):
            errors.append(f"{label} is missing or has invalid {field_name}")


def validate_data_integrity(raw: Any) -> DataIntegrityResult:
    """Check required structure and fields, and duplicate IDs."""
    errors: list[str] = []

    if (
        not isinstance(raw, dict)
        or not isinstance(raw.get("regions"), list)
        or not isinstance(raw.get("unassigned_cities"), list)
    ):
        errors.append("Missing required data structure")
        return DataIntegrityResult(is_valid=False, errors=errors)

    city_ids: list[Any] = []
    region_ids: list[Any] = []

    for index, region in enumerate(raw["regions"]):
        if not isinstance(region, dict):
            errors.append(f"Region at index {index} is not an object")
            continue
        region_id = region.get("region_id")
        region_ids.append(region_id)
        if not _is_text(region_id):
            errors.append(f"Region at index {index} is missing or has invalid region_id")
        for field_name in REGION_NAME_FIELDS:
            if not _is_text(region.get(field_name)):
                errors.append(f"Region at index {index} is missing or has invalid {field_name}")

        cities = region.get("cities")
        if not isinstance(cities, list):
            errors.append(f"Region at index {index} has invalid cities array")
            continue
        for city_index, city in enumerate(cities):
            _check_city(city, f"City at index {city_index} in region {region_id}", errors)
            if isinstance(city, dict):
                city_ids.append(city.get("city_id"))

    for index, city in enumerate(raw["unassigned_cities"]):
        _check_city(city, f"Unassigned city at index {index}", errors)
        if isinstance(city, dict):
            city_ids.append(city.get("city_id"))

    if len(region_ids) != len(set(map(repr, region_ids))):
        errors.append("Duplicate region IDs found")
    if len(city_ids) != len(set(map(repr, city_ids))):
        errors.append("Duplicate city IDs found")

    return DataIntegrityResult(is_valid=not errors, errors=errors)


def validate_data_integrity_strict(raw: Any) -> None:
    """Raise DataIntegrityError when ``raw`` fails validation."""
    result = validate_data_integrity(raw)
    if not result.is_valid:
        logger.error(f"[DATA] Integrity check failed with {len(result.errors)} errors")
        raise DataIntegrityError("; ".join(result.errors))


def get_data_statistics(dataset: "Dataset") -> DataStatistics:
    regions_count = len(dataset.regions())
    assigned = len(dataset.assigned_cities())
    unassigned = len(dataset.unassigned_cities())
    average = round(assigned / regions_count, 2) if regions_count else 0.0
    return DataStatistics(
        regions_count=regions_count,
        assigned_cities_count=assigned,
        unassigned_cities_count=unassigned,
        total_cities_count=assigned + unassigned,
        average_cities_per_region=average,
    )


def is_dataset_complete(dataset: "Dataset") -> bool:
    stats = get_data_statistics(dataset)
    return (
        stats.regions_count >= MIN_REGIONS
        and stats.total_cities_count >= MIN_TOTAL_CITIES
        and stats.average_cities_per_region >= MIN_AVERAGE_CITIES
    )


def perform_data_health_check(raw: Any, dataset: "Dataset") -> DataHealthReport:
    """Combine integrity, statistics and completeness into one report."""
    integrity = validate_data_integrity(raw)
    statistics = get_data_statistics(dataset)
    complete = is_dataset_complete(dataset)

    recommendations: list[str] = []
    if not integrity.is_valid:
        recommendations.append("Fix data integrity issues")
    if not complete:
        recommendations.append("Consider adding more cities and regions")
    if statistics.average_cities_per_region < LOW_AVERAGE_CITIES:
        recommendations.append("Some regions might need more cities")
    if statistics.unassigned_cities_count > statistics.assigned_cities_count * UNASSIGNED_RATIO_THRESHOLD:
        recommendations.append("Consider assigning unassigned cities to regions")

    return DataHealthReport(
        is_healthy=integrity.is_valid and complete,
        integrity=integrity,
        statistics=statistics,
        is_complete=complete,
        recommendations=recommendations,
    )
