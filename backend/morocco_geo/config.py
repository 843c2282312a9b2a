"""Package configuration.

Settings are read fresh by the cache store and the lookup service on every
call, so toggling caching or changing the default TTL at runtime takes
effect immediately.

Environment variables (loaded through python-dotenv):
- MOROCCO_GEO_DEFAULT_LANGUAGE: english | french | arabic
- MOROCCO_GEO_ENABLE_CACHING: true | false
- MOROCCO_GEO_CACHE_TIMEOUT: default TTL in milliseconds
- MOROCCO_GEO_STRICT_VALIDATION: true | false
- MOROCCO_GEO_DEBUG: true | false
- MOROCCO_GEO_CORS_ORIGINS: comma-separated origins allowed by the HTTP API
"""

import logging
import os
import threading
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from morocco_geo.models import ConfigError, Language

logger = logging.getLogger(__name__)

ENV_PREFIX = "MOROCCO_GEO_"

_ENV_FIELDS = {
    "DEFAULT_LANGUAGE": "default_language",
    "ENABLE_CACHING": "enable_caching",
    "CACHE_TIMEOUT": "cache_timeout",
    "STRICT_VALIDATION": "strict_validation",
    "DEBUG": "enable_debug_mode",
}


class PackageConfig(BaseModel):
    """Runtime settings for lookups and caching."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_language: Language = Language.ENGLISH
    enable_caching: bool = True
    cache_timeout: int = Field(300_000, ge=0, description="Default TTL in milliseconds")
    strict_validation: bool = False
    enable_debug_mode: bool = False

    @classmethod
    def from_env(cls) -> "PackageConfig":
        """Build a config from MOROCCO_GEO_* environment variables."""
        load_dotenv()
        values: dict[str, Any] = {}
        for suffix, field_name in _ENV_FIELDS.items():
            raw = os.getenv(ENV_PREFIX + suffix)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip().lower()
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(f"Invalid environment configuration: {e}", value=values) from e


def cors_origins_from_env() -> list[str]:
    """Origins the HTTP API accepts cross-origin requests from.

    Empty unless MOROCCO_GEO_CORS_ORIGINS is set.
    """
    load_dotenv()
    raw = os.getenv(ENV_PREFIX + "CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class ConfigProvider:
    """Holds the current PackageConfig and applies validated updates."""

    def __init__(self, config: PackageConfig | None = None) -> None:
        self._defaults = config or PackageConfig()
        self._config = self._defaults
        self._lock = threading.Lock()
        # Leave the host application's logger level alone unless debugging
        if self._config.enable_debug_mode:
            self._apply_debug_mode(True)

    def get(self) -> PackageConfig:
        """Return the current configuration (an immutable snapshot)."""
        return self._config

    def validate(self, **changes: Any) -> PackageConfig:
        """Return the config that ``set(**changes)`` would produce.

        Raises:
            ConfigError: If any value is rejected.
        """
        merged = {**self._config.model_dump(), **changes}
        try:
            return PackageConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", value=changes) from e

    def set(self, **changes: Any) -> PackageConfig:
        """Merge ``changes`` into the current configuration."""
        with self._lock:
            updated = self.validate(**changes)
            if updated.enable_debug_mode != self._config.enable_debug_mode:
                self._apply_debug_mode(updated.enable_debug_mode)
            self._config = updated
        logger.debug(f"[CONFIG] Updated: {sorted(changes)}")
        return updated

    def reset(self) -> PackageConfig:
        """Restore the configuration the provider was created with."""
        with self._lock:
            if self._defaults.enable_debug_mode != self._config.enable_debug_mode:
                self._apply_debug_mode(self._defaults.enable_debug_mode)
            self._config = self._defaults
        return self._config

    @staticmethod
    def _apply_debug_mode(enabled: bool) -> None:
        logging.getLogger("morocco_geo").setLevel(logging.DEBUG if enabled else logging.NOTSET)

    # Convenience accessors

    def default_language(self) -> Language:
        return self._config.default_language

    def set_default_language(self, language: Language | str) -> None:
        self.set(default_language=language)

    def is_caching_enabled(self) -> bool:
        return self._config.enable_caching

    def set_caching_enabled(self, enabled: bool) -> None:
        self.set(enable_caching=enabled)

    def cache_timeout(self) -> int:
        return self._config.cache_timeout

    def set_cache_timeout(self, timeout_ms: int) -> None:
        self.set(cache_timeout=timeout_ms)

    def is_strict_validation_enabled(self) -> bool:
        return self._config.strict_validation

    def set_strict_validation_enabled(self, enabled: bool) -> None:
        self.set(strict_validation=enabled)

    def is_debug_mode_enabled(self) -> bool:
        return self._config.enable_debug_mode

    def set_debug_mode_enabled(self, enabled: bool) -> None:
        self.set(enable_debug_mode=enabled)


_config_provider: ConfigProvider | None = None


def get_config_provider() -> ConfigProvider:
    global _config_provider
    if _config_provider is None:
        _config_provider = ConfigProvider(PackageConfig.from_env())
    return _config_provider
