"""
Settings for neo-permissions.

Environment driven configuration (prefix ``NEO_PERMISSIONS_``) covering the
library's logging behaviour and match tracing.
"""
from typing import Optional
from functools import lru_cache
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LOG_FORMAT, LOG_LEVELS
from ..core.exceptions import ConfigurationError


class PermissionSettings(BaseSettings):
    """Runtime settings for the permission library."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_PERMISSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_enabled: bool = Field(default=False, description="Emit library log records")
    log_level: str = Field(default="WARNING", description="Minimum level of the library sink")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Loguru format string")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")
    log_rotation: str = Field(default="10 MB")
    log_retention: str = Field(default="7 days")

    # Diagnostics
    trace_matches: bool = Field(
        default=False,
        description="Log every match and compression decision at DEBUG level"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {v}")
        return level


@lru_cache()
def get_settings() -> PermissionSettings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return PermissionSettings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid neo-permissions configuration",
            details={"errors": [err["msg"] for err in e.errors()]}
        ) from e


def clear_settings_cache() -> None:
    """Drop the cached settings so the environment is read again."""
    get_settings.cache_clear()
