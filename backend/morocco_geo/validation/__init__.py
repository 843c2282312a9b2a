"""Input validation and dataset integrity checks."""

from .data_integrity import (
    get_data_statistics,
    is_dataset_complete,
    perform_data_health_check,
    validate_data_integrity,
    validate_data_integrity_strict,
)
from .inputs import (
    get_supported_languages,
    is_language_supported,
    validate_city_id,
    validate_city_id_strict,
    validate_language,
    validate_language_strict,
    validate_language_with_mode,
    validate_languages,
    validate_non_empty_string,
    validate_region_id,
    validate_region_id_strict,
)

__all__ = [
    # Data integrity
    "get_data_statistics",
    "is_dataset_complete",
    "perform_data_health_check",
    "validate_data_integrity",
    "validate_data_integrity_strict",
    # Inputs
    "get_supported_languages",
    "is_language_supported",
    "validate_city_id",
    "validate_city_id_strict",
    "validate_language",
    "validate_language_strict",
    "validate_language_with_mode",
    "validate_languages",
    "validate_non_empty_string",
    "validate_region_id",
    "validate_region_id_strict",
]
