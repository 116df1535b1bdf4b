"""
Set queries over granted permissions.

Folds of the matcher over a grant collection. Grant and requirement
collections may be any iterable of strings; a bare string is treated as a
single permission.
"""
from typing import Iterable, List, Union

from .matcher import matches

PermissionCollection = Union[str, Iterable[str]]


def as_permission_list(permissions: PermissionCollection) -> List[str]:
    """Materialize a permission collection, wrapping a bare string."""
    if isinstance(permissions, str):
        return [permissions]
    return list(permissions)


def is_allowed(grants: PermissionCollection, required: str) -> bool:
    """Check if any grant allows the required permission."""
    return any(matches(required, granted) for granted in as_permission_list(grants))


def allows(required: str, grants: PermissionCollection) -> bool:
    """Check if the required permission is allowed by at least one grant."""
    return is_allowed(grants, required)


def all_allowed(grants: PermissionCollection, required: PermissionCollection) -> bool:
    """
    Check if the grants allow every required permission.

    Args:
        grants: Granted permissions
        required: Required permissions

    Returns:
        True if each required permission is allowed by at least one grant
    """
    granted = as_permission_list(grants)
    return all(is_allowed(granted, permission) for permission in as_permission_list(required))


def any_allowed(grants: PermissionCollection, required: PermissionCollection) -> bool:
    """
    Check if the grants allow any of the required permissions.

    Args:
        grants: Granted permissions
        required: Required permissions

    Returns:
        True if at least one required permission is allowed by at least one grant
    """
    granted = as_permission_list(grants)
    return any(is_allowed(granted, permission) for permission in as_permission_list(required))


def missing_permissions(grants: PermissionCollection, required: PermissionCollection) -> List[str]:
    """List the required permissions no grant allows, in required order."""
    granted = as_permission_list(grants)
    return [
        permission for permission in as_permission_list(required)
        if not is_allowed(granted, permission)
    ]


def effective_permissions(grants: PermissionCollection, candidates: PermissionCollection) -> List[str]:
    """Filter a catalog of permissions down to those the grants allow."""
    granted = as_permission_list(grants)
    effective: List[str] = []
    for candidate in as_permission_list(candidates):
        if candidate not in effective and is_allowed(granted, candidate):
            effective.append(candidate)
    return effective


__all__ = [
    "PermissionCollection",
    "as_permission_list",
    "is_allowed",
    "allows",
    "all_allowed",
    "any_allowed",
    "missing_permissions",
    "effective_permissions",
]
