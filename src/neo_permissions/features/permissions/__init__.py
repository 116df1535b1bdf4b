"""
Permission Module for Neo-Permissions

Hierarchical dot-notation permissions with wildcard support:
- Matching a required permission against granted permissions
- Compressing permission lists to a minimal equivalent form
- Set queries over grant collections (all / any / single)
- Enforcement guards and decorators raising on denial
"""

# Wildcard pattern matching
from .matcher import (
    matches,
    covers,
    split_permission,
    is_wildcard_permission,
    DefaultWildcardMatcher,
    create_wildcard_matcher,
)

# Compression
from .compressor import (
    compress,
    compression_priority,
    DefaultPermissionCompressor,
    create_permission_compressor,
)

# Set queries
from .queries import (
    PermissionCollection,
    as_permission_list,
    is_allowed,
    allows,
    all_allowed,
    any_allowed,
    missing_permissions,
    effective_permissions,
)

# Enforcement
from .decorators import (
    ensure_allowed,
    ensure_all_allowed,
    ensure_any_allowed,
    RequirePermission,
    require_permission,
    PermissionMetadata,
)

# Entities
from .entities import (
    LiteralSegment,
    WildcardSegment,
    Segment,
    PermissionCode,
    parse_segment,
)

# Protocol definitions
from .protocols import (
    WildcardMatcherProtocol,
    PermissionCompressorProtocol,
)


__all__ = [
    # Matching
    "matches",
    "covers",
    "split_permission",
    "is_wildcard_permission",
    "DefaultWildcardMatcher",
    "create_wildcard_matcher",

    # Compression
    "compress",
    "compression_priority",
    "DefaultPermissionCompressor",
    "create_permission_compressor",

    # Set queries
    "PermissionCollection",
    "as_permission_list",
    "is_allowed",
    "allows",
    "all_allowed",
    "any_allowed",
    "missing_permissions",
    "effective_permissions",

    # Enforcement
    "ensure_allowed",
    "ensure_all_allowed",
    "ensure_any_allowed",
    "RequirePermission",
    "require_permission",
    "PermissionMetadata",

    # Entities
    "LiteralSegment",
    "WildcardSegment",
    "Segment",
    "PermissionCode",
    "parse_segment",

    # Protocols
    "WildcardMatcherProtocol",
    "PermissionCompressorProtocol",
]
