"""Unit tests for input validation helpers."""

import pytest

from morocco_geo.config import get_config_provider
from morocco_geo.data import Dataset
from morocco_geo.models import (
    InvalidCityIdError,
    InvalidLanguageError,
    InvalidRegionIdError,
    Language,
)
from morocco_geo.validation import (
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
from tests.conftest import NORTH_ID


class TestLanguageValidation:
    def test_supported_languages(self) -> None:
        assert get_supported_languages() == ["english", "french", "arabic"]

    def test_is_language_supported(self) -> None:
        assert is_language_supported(" French ") is True
        assert is_language_supported("german") is False
        assert is_language_supported(None) is False

    def test_lenient_normalizes(self) -> None:
        assert validate_language("ARABIC") is Language.ARABIC
        assert validate_language(Language.FRENCH) is Language.FRENCH

    def test_lenient_fallback(self) -> None:
        assert validate_language("german", default=Language.FRENCH) is Language.FRENCH
        assert validate_language(None, default=Language.ARABIC) is Language.ARABIC

    def test_lenient_fallback_uses_config(self) -> None:
        provider = get_config_provider()
        provider.set_default_language("arabic")
        try:
            assert validate_language("german") is Language.ARABIC
        finally:
            provider.reset()

    def test_strict_raises(self) -> None:
        with pytest.raises(InvalidLanguageError) as exc_info:
            validate_language_strict("german")
        assert exc_info.value.language == "german"
        assert "english, french, arabic" in str(exc_info.value)

    def test_with_mode(self) -> None:
        assert validate_language_with_mode("german", strict=False) is Language.ENGLISH
        with pytest.raises(InvalidLanguageError):
            validate_language_with_mode("german", strict=True)
        assert validate_language_with_mode("french", strict=True) is Language.FRENCH

    def test_with_mode_follows_config(self) -> None:
        provider = get_config_provider()
        provider.set_strict_validation_enabled(True)
        try:
            with pytest.raises(InvalidLanguageError):
                validate_language_with_mode("german")
        finally:
            provider.reset()

    def test_validate_languages(self) -> None:
        assert validate_languages(["french", "arabic"]) == [Language.FRENCH, Language.ARABIC]


class TestIdValidation:
    def test_region_id(self, dataset: Dataset) -> None:
        assert validate_region_id(dataset, NORTH_ID) is True
        assert validate_region_id(dataset, "nope") is False
        assert validate_region_id(dataset, 123) is False

    def test_region_id_strict(self, dataset: Dataset) -> None:
        assert validate_region_id_strict(dataset, NORTH_ID) == NORTH_ID
        with pytest.raises(InvalidRegionIdError) as exc_info:
            validate_region_id_strict(dataset, "nope")
        assert exc_info.value.value == "nope"

    @pytest.mark.parametrize("city_id", [1, 42])
    def test_valid_city_ids(self, city_id: int) -> None:
        assert validate_city_id(city_id) is True

    @pytest.mark.parametrize("city_id", [0, -1, 1.5, "3", True, None])
    def test_invalid_city_ids(self, city_id) -> None:
        assert validate_city_id(city_id) is False

    def test_city_id_strict(self) -> None:
        with pytest.raises(InvalidCityIdError):
            validate_city_id_strict(0)


class TestNonEmptyString:
    def test_values(self) -> None:
        assert validate_non_empty_string("Rabat") is True
        assert validate_non_empty_string("   ") is False
        assert validate_non_empty_string("") is False
        assert validate_non_empty_string(None) is False
