"""
Permission Enforcement

Raising counterparts of the set queries and a decorator that guards a
callable with declared permission requirements:

    @require_permission("assets.files.read")
    def read_file(path, grants=None):
        ...

    @require_permission(["users.read", "users.list"], any_of=True)
    async def view_users(grants=None):
        ...

The grants are taken from the argument named by ``grants_param`` when the
guarded callable is invoked, whether it is passed by keyword or by position.
"""

import inspect
from functools import wraps
from typing import Callable, Iterable, List, Optional, Union
from loguru import logger

from ...core.exceptions import InsufficientPermissionsError, PermissionDeniedError
from .queries import PermissionCollection, as_permission_list, missing_permissions


def _denial_details(required: List[str], missing: List[str], granted: List[str]) -> dict:
    return {"required": required, "missing": missing, "granted": granted}


def ensure_allowed(grants: PermissionCollection, required: str) -> None:
    """
    Ensure the grants allow the required permission.

    Raises:
        PermissionDeniedError: If no grant allows it
    """
    ensure_all_allowed(grants, [required])


def ensure_all_allowed(grants: PermissionCollection, required: PermissionCollection) -> None:
    """
    Ensure the grants allow every required permission.

    Raises:
        PermissionDeniedError: If none of the required permissions is allowed
        InsufficientPermissionsError: If only some of them are allowed
    """
    granted = as_permission_list(grants)
    required_list = as_permission_list(required)
    missing = missing_permissions(granted, required_list)
    if not missing:
        return

    details = _denial_details(required_list, missing, granted)
    if len(missing) == len(required_list):
        logger.warning(f"Permission denied: missing {missing}")
        raise PermissionDeniedError(
            f"Missing required permissions: {', '.join(missing)}",
            details=details
        )

    logger.warning(f"Insufficient permissions: missing {missing} of {required_list}")
    raise InsufficientPermissionsError(
        f"Missing {len(missing)} of {len(required_list)} required permissions: {', '.join(missing)}",
        details=details
    )


def ensure_any_allowed(grants: PermissionCollection, required: PermissionCollection) -> None:
    """
    Ensure the grants allow at least one required permission.

    Raises:
        PermissionDeniedError: If none of the required permissions is allowed
    """
    granted = as_permission_list(grants)
    required_list = as_permission_list(required)
    missing = missing_permissions(granted, required_list)
    if required_list and len(missing) < len(required_list):
        return

    logger.warning(f"Permission denied: none of {required_list} is granted")
    raise PermissionDeniedError(
        f"None of the permissions is granted: {', '.join(required_list)}",
        details=_denial_details(required_list, missing, granted)
    )


class RequirePermission:
    """
    Decorator class guarding a callable with permission requirements.

    Attaches ``_permissions`` metadata to the wrapper for discovery and checks
    the grants passed to each call before the wrapped callable runs. Works for
    plain functions and coroutine functions.
    """

    def __init__(
        self,
        permission: Union[str, List[str]],
        any_of: bool = False,
        grants_param: str = "grants",
        description: Optional[str] = None
    ):
        """
        Initialize permission requirement decorator.

        Args:
            permission: Permission(s) required (e.g., "users.read", ["users.read", "users.list"])
            any_of: If True, ANY of the permissions suffices; if False, ALL are needed
            grants_param: Argument holding the caller's grants
            description: Human-readable description for documentation
        """
        self.permissions = as_permission_list(permission)
        self.any_of = any_of
        self.grants_param = grants_param
        self.description = description

    def check(self, grants: Optional[Iterable[str]]) -> None:
        """Raise if the grants do not satisfy this requirement."""
        granted = [] if grants is None else grants
        if self.any_of:
            ensure_any_allowed(granted, self.permissions)
        else:
            ensure_all_allowed(granted, self.permissions)

    def _find_grants(self, signature: inspect.Signature, args: tuple, kwargs: dict) -> Optional[Iterable[str]]:
        """Locate the grants argument of a call, by keyword or by position."""
        if self.grants_param not in signature.parameters:
            # Only reachable through **kwargs
            return kwargs.get(self.grants_param)
        return signature.bind_partial(*args, **kwargs).arguments.get(self.grants_param)

    def __call__(self, func: Callable) -> Callable:
        """
        Apply decorator to function.

        Args:
            func: Function to decorate

        Returns:
            Guarded function with permission metadata
        """
        requirement = {
            "permissions": self.permissions,
            "any_of": self.any_of,
            "description": self.description,
        }
        signature = inspect.signature(func)

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                self.check(self._find_grants(signature, args, kwargs))
                return await func(*args, **kwargs)
        else:
            @wraps(func)
            def wrapper(*args, **kwargs):
                self.check(self._find_grants(signature, args, kwargs))
                return func(*args, **kwargs)

        wrapper._permissions = list(getattr(func, "_permissions", [])) + [requirement]

        logger.debug(f"Applied permission requirements to {func.__name__}: {self.permissions}")
        return wrapper


def require_permission(
    permission: Union[str, List[str]],
    any_of: bool = False,
    grants_param: str = "grants",
    description: Optional[str] = None
) -> RequirePermission:
    """
    Functional decorator for declaring permission requirements.

    Args:
        permission: Permission(s) required
        any_of: If True, ANY of the permissions suffices; if False, ALL are needed
        grants_param: Argument holding the caller's grants
        description: Human-readable description for documentation

    Returns:
        Decorator with the specified permission requirements
    """
    return RequirePermission(
        permission=permission,
        any_of=any_of,
        grants_param=grants_param,
        description=description
    )


class PermissionMetadata:
    """Helper class to extract permission metadata from decorated callables."""

    @staticmethod
    def extract(func: Callable) -> List[dict]:
        """
        Extract permission metadata from a function.

        Args:
            func: Function to extract metadata from

        Returns:
            List of permission requirement dictionaries
        """
        if hasattr(func, "_permissions"):
            return func._permissions

        if hasattr(func, "__wrapped__"):
            return PermissionMetadata.extract(func.__wrapped__)

        return []

    @staticmethod
    def has_permissions(func: Callable) -> bool:
        """Check if function has permission requirements."""
        return bool(PermissionMetadata.extract(func))


__all__ = [
    "ensure_allowed",
    "ensure_all_allowed",
    "ensure_any_allowed",
    "RequirePermission",
    "require_permission",
    "PermissionMetadata",
]
