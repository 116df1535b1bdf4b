"""
Permission Compressor for Neo-Permissions

Reduces a permission list to a smaller subset allowing the same permissions:
any permission allowed by the output is allowed by the input, and apart from
the case noted below the reverse holds too.

For example:
- "users.*" and "users.read" compress to "users.*"
- "assets.files.*" and "assets.files.read" compress to "assets.files.*"
- any list containing "*" compresses to ["*"]

Candidates are visited broadest-first so that narrower grants are absorbed in
a single greedy pass. The ordering (wildcard grants first, then deeper grants
first) is a heuristic rather than a true generality order, so some inputs may
keep an entry a smarter reducer would drop. In the rare case of a deeper
grant ending in wildcards, such as "x.*.*" next to "x.*", the deeper grant
absorbs the broader one and the bare prefix "x" is no longer allowed.
"""
from typing import Iterable, List, Tuple
from loguru import logger

from ...config.constants import GLOBAL_WILDCARD, SEPARATOR
from ...config.logging_config import is_match_tracing_enabled
from .matcher import covers, is_wildcard_permission


def compression_priority(permission: str) -> Tuple[bool, int]:
    """Sort key for compression: wildcard grants, then deeper grants, sort higher."""
    return is_wildcard_permission(permission), permission.count(SEPARATOR)


def compress(permissions: Iterable[str]) -> List[str]:
    """
    Compress permissions by eliminating entries covered by other entries.

    Args:
        permissions: Permissions to compress

    Returns:
        Minimal permission list, in the order entries were accepted
    """
    candidates = list(permissions)
    if not candidates:
        return []

    if GLOBAL_WILDCARD in candidates:
        return [GLOBAL_WILDCARD]

    ordered = sorted(candidates, key=compression_priority, reverse=True)

    result: List[str] = []
    for permission in ordered:
        if any(covers(accepted, permission) for accepted in result):
            if is_match_tracing_enabled():
                logger.debug(f"Dropping covered permission '{permission}'")
            continue
        result.append(permission)

    if is_match_tracing_enabled():
        logger.debug(f"Compressed {len(candidates)} permissions to {len(result)}")

    return result


class DefaultPermissionCompressor:
    """Stateless facade over ``compress`` for dependency injection."""

    def compress(self, permissions: Iterable[str]) -> List[str]:
        """Compress permissions to a minimal equivalent list."""
        return compress(permissions)

    def is_redundant(self, permission: str, permissions: Iterable[str]) -> bool:
        """Check if permission is covered by another entry of permissions.

        One occurrence of permission itself is skipped, so a duplicate entry
        makes it redundant.
        """
        others = list(permissions)
        if permission in others:
            others.remove(permission)
        return any(covers(other, permission) for other in others)


def create_permission_compressor() -> DefaultPermissionCompressor:
    """
    Create a permission compressor instance.

    Returns:
        DefaultPermissionCompressor instance
    """
    return DefaultPermissionCompressor()


__all__ = [
    "compress",
    "compression_priority",
    "DefaultPermissionCompressor",
    "create_permission_compressor",
]
