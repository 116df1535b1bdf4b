"""Exceptions module for neo-permissions."""

from .base import (
    NeoPermissionsError,
    create_error_response,
)

from .domain import (
    ConfigurationError,
    AuthorizationError,
    PermissionDeniedError,
    InsufficientPermissionsError,
)

__all__ = [
    "NeoPermissionsError",
    "create_error_response",
    "ConfigurationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "InsufficientPermissionsError",
]
