"""Neo-Permissions - hierarchical wildcard permissions for NeoMultiTenant services.

Permissions are dot-separated segments from domain to action
(``assets.files.read``). Grants may use ``*`` for a single segment
(``assets.*.read``), for a prefix and everything below it (``assets.*``), or
for everything (``*``).
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import (
    PermissionSettings,
    get_settings,
    clear_settings_cache,
    reset_logging,
    SEPARATOR,
    WILDCARD,
    GLOBAL_WILDCARD,
)

from .core.exceptions import (
    NeoPermissionsError,
    ConfigurationError,
    AuthorizationError,
    PermissionDeniedError,
    InsufficientPermissionsError,
    create_error_response,
)

from .features.permissions import (
    # Core operations
    matches,
    compress,
    allows,
    is_allowed,
    all_allowed,
    any_allowed,

    # Helpers
    covers,
    is_wildcard_permission,
    missing_permissions,
    effective_permissions,

    # Enforcement
    ensure_allowed,
    ensure_all_allowed,
    ensure_any_allowed,
    RequirePermission,
    require_permission,

    # Implementations
    PermissionCode,
    DefaultWildcardMatcher,
    DefaultPermissionCompressor,
    create_wildcard_matcher,
    create_permission_compressor,
    WildcardMatcherProtocol,
    PermissionCompressorProtocol,
)

__all__ = [
    "__version__",
    "setup_logging",
    "reset_logging",
    "PermissionSettings",
    "get_settings",
    "clear_settings_cache",
    "SEPARATOR",
    "WILDCARD",
    "GLOBAL_WILDCARD",
    "NeoPermissionsError",
    "ConfigurationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "InsufficientPermissionsError",
    "create_error_response",
    "matches",
    "compress",
    "allows",
    "is_allowed",
    "all_allowed",
    "any_allowed",
    "covers",
    "is_wildcard_permission",
    "missing_permissions",
    "effective_permissions",
    "ensure_allowed",
    "ensure_all_allowed",
    "ensure_any_allowed",
    "RequirePermission",
    "require_permission",
    "PermissionCode",
    "DefaultWildcardMatcher",
    "DefaultPermissionCompressor",
    "create_wildcard_matcher",
    "create_permission_compressor",
    "WildcardMatcherProtocol",
    "PermissionCompressorProtocol",
]
