"""Unit tests for PackageConfig and ConfigProvider."""

import logging

import pytest

from morocco_geo.config import ConfigProvider, PackageConfig, cors_origins_from_env
from morocco_geo.models import ConfigError, Language


class TestPackageConfig:
    def test_defaults(self) -> None:
        config = PackageConfig()
        assert config.default_language is Language.ENGLISH
        assert config.enable_caching is True
        assert config.cache_timeout == 300_000
        assert config.strict_validation is False
        assert config.enable_debug_mode is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOROCCO_GEO_DEFAULT_LANGUAGE", "French")
        monkeypatch.setenv("MOROCCO_GEO_ENABLE_CACHING", "false")
        monkeypatch.setenv("MOROCCO_GEO_CACHE_TIMEOUT", "1500")
        config = PackageConfig.from_env()
        assert config.default_language is Language.FRENCH
        assert config.enable_caching is False
        assert config.cache_timeout == 1500

    def test_from_env_rejects_bad_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOROCCO_GEO_CACHE_TIMEOUT", "-5")
        with pytest.raises(ConfigError):
            PackageConfig.from_env()

    def test_cors_origins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(
            "MOROCCO_GEO_CORS_ORIGINS", "https://maps.example.ma, http://localhost:3000,"
        )
        assert cors_origins_from_env() == ["https://maps.example.ma", "http://localhost:3000"]

    def test_cors_origins_default_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MOROCCO_GEO_CORS_ORIGINS", raising=False)
        assert cors_origins_from_env() == []


class TestConfigProvider:
    def setup_method(self) -> None:
        self.provider = ConfigProvider()

    def teardown_method(self) -> None:
        self.provider.reset()

    def test_set_merges(self) -> None:
        self.provider.set(cache_timeout=1000)
        config = self.provider.get()
        assert config.cache_timeout == 1000
        assert config.enable_caching is True

    def test_get_is_snapshot(self) -> None:
        before = self.provider.get()
        self.provider.set_caching_enabled(False)
        assert before.enable_caching is True
        assert self.provider.is_caching_enabled() is False

    def test_reset(self) -> None:
        self.provider.set(default_language="arabic", strict_validation=True)
        self.provider.reset()
        assert self.provider.default_language() is Language.ENGLISH
        assert self.provider.is_strict_validation_enabled() is False

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ConfigError):
            self.provider.set_cache_timeout(-1)
        assert self.provider.cache_timeout() == 300_000

    def test_invalid_language_rejected(self) -> None:
        with pytest.raises(ConfigError):
            self.provider.set_default_language("spanish")

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ConfigError):
            self.provider.set(max_entries=10)

    def test_validate_does_not_apply(self) -> None:
        validated = self.provider.validate(cache_timeout=42)
        assert validated.cache_timeout == 42
        assert self.provider.cache_timeout() == 300_000

    def test_debug_mode_sets_logger_level(self) -> None:
        self.provider.set_debug_mode_enabled(True)
        assert self.provider.is_debug_mode_enabled() is True
        assert logging.getLogger("morocco_geo").level == logging.DEBUG
        self.provider.set_debug_mode_enabled(False)
        assert logging.getLogger("morocco_geo").level == logging.NOTSET

    def test_new_provider_keeps_host_logger_level(self) -> None:
        package_logger = logging.getLogger("morocco_geo")
        package_logger.setLevel(logging.WARNING)
        try:
            ConfigProvider()
            ConfigProvider(PackageConfig(enable_caching=False)).reset()
            assert package_logger.level == logging.WARNING
        finally:
            package_logger.setLevel(logging.NOTSET)

    def test_provider_created_in_debug_mode(self) -> None:
        provider = ConfigProvider(PackageConfig(enable_debug_mode=True))
        try:
            assert logging.getLogger("morocco_geo").level == logging.DEBUG
        finally:
            provider.set_debug_mode_enabled(False)
