"""Configuration module for neo-permissions."""

from .constants import (
    PermissionSyntax,
    SEPARATOR,
    WILDCARD,
    GLOBAL_WILDCARD,
    LOG_NAMESPACE,
    LOG_LEVELS,
    DEFAULT_LOG_FORMAT,
)

from .settings import (
    PermissionSettings,
    get_settings,
    clear_settings_cache,
)

from .logging_config import (
    LoggingConfig,
    setup_logging,
    reset_logging,
    is_match_tracing_enabled,
)

__all__ = [
    # Constants
    "PermissionSyntax",
    "SEPARATOR",
    "WILDCARD",
    "GLOBAL_WILDCARD",
    "LOG_NAMESPACE",
    "LOG_LEVELS",
    "DEFAULT_LOG_FORMAT",

    # Settings
    "PermissionSettings",
    "get_settings",
    "clear_settings_cache",

    # Logging
    "LoggingConfig",
    "setup_logging",
    "reset_logging",
    "is_match_tracing_enabled",
]
