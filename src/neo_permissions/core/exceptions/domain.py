"""Domain exceptions for neo-permissions."""

from .base import NeoPermissionsError


# Configuration Errors
class ConfigurationError(NeoPermissionsError):
    """Raised when library configuration is invalid."""
    pass


# Authorization Errors
class AuthorizationError(NeoPermissionsError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when none of the required permissions is granted."""
    pass


class InsufficientPermissionsError(PermissionDeniedError):
    """Raised when some but not all required permissions are granted."""
    pass
