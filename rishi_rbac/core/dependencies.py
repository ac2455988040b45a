"""FastAPI dependencies for route protection."""
from collections.abc import Awaitable, Callable
from typing import Union

from fastapi import Depends, HTTPException, Request, status

from rishi_rbac.core.permissions import HeldPermissions, check_permission

# Returns the caller's held grants. Establishing who the caller is happens there.
HeldPermissionsProvider = Callable[..., Union[HeldPermissions, Awaitable[HeldPermissions]]]


def require_permission(required_permission: str, held_permissions: HeldPermissionsProvider):
    """
    Dependency factory to require a specific permission.

    Usage:
        async def current_permissions(request: Request) -> list[str]:
            ...

        @router.patch("/events/{event_id}")
        async def update_event(
            permissions=Depends(require_permission("update:events:owned", current_permissions))
        ):
            ...

    Args:
        required_permission: Permission string like "update:events:owned"
        held_permissions: Dependency returning the caller's held grants

    Returns:
        Dependency function that returns the held grants if authorized
    """

    async def permission_checker(
        request: Request,
        permissions: HeldPermissions = Depends(held_permissions),
    ) -> HeldPermissions:
        has_perm = check_permission(permissions, required_permission)

        # Store permission info in request state for logging
        set_permission_used(request, required_permission, has_perm)

        if not has_perm:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {required_permission}",
            )

        return permissions

    return permission_checker


def set_permission_used(request: Request, permission: str, has_perm: bool = True):
    """Store a permission decision in request state for audit logging."""
    request.state.permission_used = permission
    request.state.has_permission = has_perm
