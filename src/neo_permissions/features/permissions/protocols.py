"""
Permission Protocols for Neo-Permissions

Protocol definitions for wildcard matching and permission compression, so
services can accept any compatible implementation.
"""
from typing import Iterable, List, Protocol, runtime_checkable


@runtime_checkable
class WildcardMatcherProtocol(Protocol):
    """Protocol for wildcard permission matching."""

    def matches_permission(
        self,
        required_permission: str,
        granted_permission: str
    ) -> bool:
        """Check if granted permission matches required permission."""
        ...

    def is_wildcard_permission(self, permission: str) -> bool:
        """Check if permission contains wildcards."""
        ...

    def check_permissions_list(
        self,
        required_permissions: Iterable[str],
        granted_permissions: Iterable[str],
        require_all: bool = True
    ) -> bool:
        """Check if granted permissions satisfy required permissions."""
        ...


@runtime_checkable
class PermissionCompressorProtocol(Protocol):
    """Protocol for reducing permission lists to a minimal equivalent form."""

    def compress(self, permissions: Iterable[str]) -> List[str]:
        """Compress permissions to a minimal equivalent list."""
        ...

    def is_redundant(self, permission: str, permissions: Iterable[str]) -> bool:
        """Check if permission is covered by another entry of permissions."""
        ...


__all__ = [
    "WildcardMatcherProtocol",
    "PermissionCompressorProtocol",
]
