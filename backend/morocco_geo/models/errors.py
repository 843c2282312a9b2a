"""Error models and exceptions for Morocco Geo.

Not-found lookups return None and never raise. The exceptions below are
reserved for inputs a caller asserted to be valid (strict validation, the
count-by-region operation) and for rejected configuration or a broken
dataset. Each exception carries the offending value so callers can report
it.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from .core import Language


class ErrorCode(str, Enum):
    """Machine-readable error codes surfaced to API clients."""

    INVALID_LANGUAGE = "INVALID_LANGUAGE"
    INVALID_REGION_ID = "INVALID_REGION_ID"
    INVALID_CITY_ID = "INVALID_CITY_ID"
    DATA_INTEGRITY = "DATA_INTEGRITY"
    INVALID_CONFIG = "INVALID_CONFIG"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    API_ERROR = "API_ERROR"


class AppError(BaseModel):
    """Error envelope returned by the HTTP layer."""

    code: ErrorCode
    message: str
    user_message: str = Field(..., description="Human-readable message for display")
    value: Optional[Any] = None


class MoroccoGeoError(Exception):
    """Base class for all package errors."""

    error_code: ErrorCode = ErrorCode.API_ERROR
    user_message: str = "Something went wrong."

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def to_app_error(self) -> AppError:
        return AppError(
            code=self.error_code,
            message=self.message,
            user_message=self.user_message,
            value=self.value,
        )


class InvalidLanguageError(MoroccoGeoError):
    """Raised by strict language validation."""

    error_code = ErrorCode.INVALID_LANGUAGE
    user_message = "Unsupported language."

    def __init__(self, language: Any) -> None:
        supported = ", ".join(lang.value for lang in Language)
        super().__init__(
            f"Invalid language: {language}. Supported languages are: {supported}",
            value=language,
        )
        self.language = language


class InvalidRegionIdError(MoroccoGeoError):
    """Raised when a region ID does not exist in the dataset."""

    error_code = ErrorCode.INVALID_REGION_ID
    user_message = "Unknown region."

    def __init__(self, region_id: Any) -> None:
        super().__init__(f"Invalid region ID: {region_id}", value=region_id)
        self.region_id = region_id


class InvalidCityIdError(MoroccoGeoError):
    """Raised when a city ID is not a positive integer."""

    error_code = ErrorCode.INVALID_CITY_ID
    user_message = "Invalid city identifier."

    def __init__(self, city_id: Any) -> None:
        super().__init__(f"Invalid city ID: {city_id}", value=city_id)
        self.city_id = city_id


class DataIntegrityError(MoroccoGeoError):
    """Raised when the bundled dataset fails structural validation."""

    error_code = ErrorCode.DATA_INTEGRITY
    user_message = "The dataset is corrupted."

    def __init__(self, message: str) -> None:
        super().__init__(f"Data integrity error: {message}", value=message)


class ConfigError(MoroccoGeoError):
    """Raised when a configuration update is rejected."""

    error_code = ErrorCode.INVALID_CONFIG
    user_message = "Invalid configuration."
