"""Input normalization and guard functions.

Lenient validators coerce bad input to a safe default; the ``*_strict``
variants raise the matching MoroccoGeoError instead.
"""

from typing import TYPE_CHECKING, Any, Iterable, Optional

from morocco_geo.config import get_config_provider
from morocco_geo.models import (
    InvalidCityIdError,
    InvalidLanguageError,
    InvalidRegionIdError,
    Language,
)

if TYPE_CHECKING:
    from morocco_geo.data import Dataset


def _normalize(language: Any) -> str:
    if isinstance(language, Language):
        return language.value
    if not isinstance(language, str):
        return ""
    return language.strip().lower()


def get_supported_languages() -> list[str]:
    return [language.value for language in Language]


def is_language_supported(language: Any) -> bool:
    return _normalize(language) in get_supported_languages()


def validate_language(language: Any, default: Optional[Language] = None) -> Language:
    """Resolve ``language`` to a Language, falling back to the default.

    The fallback is ``default`` when given, otherwise the configured
    default language.
    """
    normalized = _normalize(language)
    if normalized in get_supported_languages():
        return Language(normalized)
    if default is not None:
        return Language(default)
    return get_config_provider().default_language()


def validate_language_strict(language: Any) -> Language:
    """Resolve ``language`` or raise InvalidLanguageError."""
    normalized = _normalize(language)
    if normalized not in get_supported_languages():
        raise InvalidLanguageError(language)
    return Language(normalized)


def validate_language_with_mode(language: Any, strict: Optional[bool] = None) -> Language:
    """Strict or lenient validation; ``strict=None`` follows the config."""
    if strict is None:
        strict = get_config_provider().is_strict_validation_enabled()
    if strict:
        return validate_language_strict(language)
    return validate_language(language)


def validate_languages(languages: Iterable[Any]) -> list[Language]:
    return [validate_language(language) for language in languages]


def validate_region_id(dataset: "Dataset", region_id: Any) -> bool:
    return isinstance(region_id, str) and dataset.find_region(region_id) is not None


def validate_region_id_strict(dataset: "Dataset", region_id: Any) -> str:
    if not validate_region_id(dataset, region_id):
        raise InvalidRegionIdError(region_id)
    return region_id


def validate_city_id(city_id: Any) -> bool:
    """True for positive integers; bools and floats are rejected."""
    return isinstance(city_id, int) and not isinstance(city_id, bool) and city_id > 0


def validate_city_id_strict(city_id: Any) -> int:
    if not validate_city_id(city_id):
        raise InvalidCityIdError(city_id)
    return city_id


def validate_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
