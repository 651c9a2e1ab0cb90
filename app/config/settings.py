"""Typed runtime settings with dotenv support and startup validation."""

from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APPLICATION_HOST = "0.0.0.0"
SUPPORTED_LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `application_port` reads from `APPLICATION_PORT`, falling back to
    the platform-supplied `PORT`.

    Attributes:
        application_port: Web server listening port.
        log_level: Server log level forwarded to uvicorn.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    application_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("application_port", "port"),
    )
    log_level: str = Field(default="info")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(SUPPORTED_LOG_LEVELS)}")
        return normalized_value


def config_load_settings(**overrides: Any) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        overrides: Explicit field values taking precedence over environment input,
            e.g. a command-line port override.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
