"""
Wildcard Permission Matcher for Neo-Permissions

Decides whether a granted permission authorizes a required one. Permissions use
hierarchical dot-notation, from the most general segment (domain) to the most
specific (action):

- Exact matches: "users.read" matches "users.read"
- Positional wildcards: "assets.*.read" matches "assets.files.read"
- Trailing wildcards: "assets.*" matches "assets.files" and
  "assets.stats.history.monthly.view"
- Global wildcard: "*" matches any permission

A wildcard in the middle of a grant stands for exactly one segment. A wildcard
in the last position grants its prefix and everything below it.
"""
from typing import Iterable, List, Sequence
from loguru import logger

from ...config.constants import GLOBAL_WILDCARD, SEPARATOR, WILDCARD
from ...config.logging_config import is_match_tracing_enabled


def split_permission(permission: str) -> List[str]:
    """Split a permission into segments. Empty segments are kept as literals."""
    return permission.split(SEPARATOR)


def _prefix_matches(required: Sequence[str], granted: Sequence[str], length: int) -> bool:
    for index in range(length):
        granted_segment = granted[index]
        if granted_segment == WILDCARD:
            continue
        if granted_segment != required[index]:
            return False
    return True


def matches(required: str, granted: str) -> bool:
    """
    Check if the required permission is allowed by the granted permission.

    Args:
        required: Permission being checked (e.g., "assets.files.read")
        granted: Permission that was granted (e.g., "assets.*")

    Returns:
        True if granted permission satisfies required permission
    """
    if granted == GLOBAL_WILDCARD:
        result = True
    else:
        required_segments = split_permission(required)
        granted_segments = split_permission(granted)

        if granted_segments[-1] == WILDCARD:
            prefix_length = len(granted_segments) - 1
            result = (
                prefix_length <= len(required_segments)
                and _prefix_matches(required_segments, granted_segments, prefix_length)
            )
        else:
            # Without a trailing wildcard the depths must agree
            result = (
                len(granted_segments) == len(required_segments)
                and _prefix_matches(required_segments, granted_segments, len(required_segments))
            )

    if is_match_tracing_enabled():
        logger.debug(f"Permission match: '{granted}' vs '{required}' -> {result}")

    return result


def covers(broader: str, narrower: str) -> bool:
    """Check if a grant covers another grant or a required permission."""
    return matches(narrower, broader)


def is_wildcard_permission(permission: str) -> bool:
    """
    Check if permission contains a wildcard segment.

    Args:
        permission: Permission string to check

    Returns:
        True if any segment is the wildcard token
    """
    return WILDCARD in split_permission(permission)


class DefaultWildcardMatcher:
    """
    Default implementation of wildcard permission matching.

    Stateless facade over the module level functions, suitable for dependency
    injection wherever a ``WildcardMatcherProtocol`` is expected.
    """

    def matches_permission(self, required_permission: str, granted_permission: str) -> bool:
        """Check if granted permission matches required permission."""
        return matches(required_permission, granted_permission)

    def is_wildcard_permission(self, permission: str) -> bool:
        """Check if permission contains wildcards."""
        return is_wildcard_permission(permission)

    def check_permissions_list(
        self,
        required_permissions: Iterable[str],
        granted_permissions: Iterable[str],
        require_all: bool = True
    ) -> bool:
        """
        Check if granted permissions satisfy required permissions.

        Args:
            required_permissions: Permissions being checked
            granted_permissions: Permissions that were granted
            require_all: If True, all required permissions must be satisfied

        Returns:
            True if permissions are satisfied based on require_all flag
        """
        granted = list(granted_permissions)
        satisfied = (
            any(self.matches_permission(required, g) for g in granted)
            for required in required_permissions
        )
        return all(satisfied) if require_all else any(satisfied)


# Factory function for dependency injection
def create_wildcard_matcher() -> DefaultWildcardMatcher:
    """
    Create a wildcard matcher instance.

    Returns:
        DefaultWildcardMatcher instance
    """
    return DefaultWildcardMatcher()


__all__ = [
    "matches",
    "covers",
    "split_permission",
    "is_wildcard_permission",
    "DefaultWildcardMatcher",
    "create_wildcard_matcher",
]
