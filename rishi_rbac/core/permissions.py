"""Permission coverage: does a held grant authorize a requested permission."""
import logging
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from rishi_rbac.core.codec import parse_permission
from rishi_rbac.core.permission_registry import all_permissions
from rishi_rbac.core.vocabulary import (
    ALL_RESOURCES,
    MANAGE_IMPLIED_ACTIONS,
    ActionType,
    PermissionScope,
)

logger = logging.getLogger(__name__)

# Held grants may be a plain collection of strings or a {grant: enabled} mapping
HeldPermissions = Union[Iterable[str], Mapping[str, bool]]

# Target scopes each covering scope reaches. "all" reaches everything and is
# handled separately. organization and region are siblings; neither covers
# the other.
SCOPE_HIERARCHY: dict[str, frozenset[str]] = {
    PermissionScope.ORGANIZATION.value: frozenset(
        {
            PermissionScope.ORGANIZATION.value,
            PermissionScope.OWNED.value,
            PermissionScope.ASSIGNED.value,
        }
    ),
    PermissionScope.REGION.value: frozenset(
        {
            PermissionScope.REGION.value,
            PermissionScope.OWNED.value,
            PermissionScope.ASSIGNED.value,
        }
    ),
    PermissionScope.OWNED.value: frozenset(
        {PermissionScope.OWNED.value, PermissionScope.ASSIGNED.value}
    ),
    PermissionScope.ASSIGNED.value: frozenset({PermissionScope.ASSIGNED.value}),
}


def scope_covers(covering_scope: str, target_scope: str) -> bool:
    """
    Check if a covering scope includes a target scope.

    Scope Hierarchy:
        all ⊇ organization ⊇ owned ⊇ assigned
        all ⊇ region ⊇ owned ⊇ assigned

    Unknown covering scopes cover nothing.
    """
    if covering_scope == PermissionScope.ALL.value:
        return True
    return target_scope in SCOPE_HIERARCHY.get(covering_scope, frozenset())


def _scoped_grant_covers(covering_scope: Optional[str], target_scope: Optional[str]) -> bool:
    # Unscoped grants apply at every scope; a scoped grant never covers an
    # unscoped (global) request.
    if covering_scope is None:
        return True
    if target_scope is None:
        return False
    return scope_covers(covering_scope, target_scope)


def permission_covers(covering_permission: str, target_permission: str) -> bool:
    """
    Check if a held permission covers a requested permission.

    Rules, first match decides:
        1. Identical strings cover each other.
        2. A grant on the "all" resource covers the same action on any
           resource, at any scope.
        3. "manage" covers view/create/update/delete on the same resource,
           subject to the scope hierarchy.
        4. The same action on the same resource covers subject to the scope
           hierarchy.
        5. Nothing else covers.

    Args:
        covering_permission: Held grant, e.g. "manage:events:organization"
        target_permission: Requested permission, e.g. "view:events:assigned"

    Returns:
        True if the held grant authorizes the request

    Raises:
        MalformedPermissionError: If either string has fewer than two segments

    Examples:
        permission_covers("manage:users", "view:users") -> True
        permission_covers("manage:users", "assign:users") -> False
        permission_covers("view:all", "view:users") -> True
        permission_covers("view:all", "create:users") -> False
        permission_covers("manage:events:organization", "view:events:assigned") -> True
        permission_covers("manage:events:organization", "view:events:region") -> False
        permission_covers("view:users", "view:users:assigned") -> True
        permission_covers("view:users:owned", "view:users") -> False

        # No rule combines the wildcard resource with manage
        permission_covers("manage:all", "view:users") -> False
    """
    if covering_permission == target_permission:
        return True

    covering = parse_permission(covering_permission)
    target = parse_permission(target_permission)

    if covering.resource == ALL_RESOURCES and covering.action == target.action:
        return True

    if (
        covering.action == ActionType.MANAGE.value
        and covering.resource == target.resource
        and target.action in MANAGE_IMPLIED_ACTIONS
    ):
        return _scoped_grant_covers(covering.scope, target.scope)

    if covering.action == target.action and covering.resource == target.resource:
        return _scoped_grant_covers(covering.scope, target.scope)

    return False


def _granted(permissions: HeldPermissions) -> list[str]:
    if isinstance(permissions, Mapping):
        return [perm for perm, enabled in permissions.items() if enabled]
    return list(permissions)


def check_permission(permissions: HeldPermissions, required_permission: str) -> bool:
    """
    Check if any held permission covers the required permission.

    Args:
        permissions: Held grants, as strings or a {grant: enabled} mapping
        required_permission: The permission needed for the operation

    Returns:
        True on the first covering grant, False otherwise (including for an
        empty held set)

    Examples:
        check_permission(["manage:organizations:organization", "view:reports"],
                         "update:organizations:owned") -> True
        check_permission(["manage:organizations:organization", "view:reports"],
                         "export:reports") -> False
        check_permission({"view:all": True}, "view:events") -> True
        check_permission({"view:all": False}, "view:events") -> False
    """
    for held in _granted(permissions):
        if permission_covers(held, required_permission):
            return True

    logger.debug("No held permission covers %s", required_permission)
    return False


def validate_permission_subset(
    subset_perms: HeldPermissions, superset_perms: HeldPermissions
) -> tuple[bool, list[str]]:
    """
    Validate that every requested grant is covered by the held grants.

    Used when delegating permissions, e.g. so a role editor cannot grant a
    role more than they hold themselves.

    Args:
        subset_perms: Grants being handed out
        superset_perms: Grants the delegating user holds

    Returns:
        Tuple of (is_valid, list_of_violations)

    Examples:
        validate_permission_subset(["view:events:owned"], ["manage:events:organization"])
            -> (True, [])
        validate_permission_subset(["view:events"], ["manage:events:organization"])
            -> (False, ["view:events"])
    """
    held = _granted(superset_perms)
    violations = [perm for perm in _granted(subset_perms) if not check_permission(held, perm)]

    return len(violations) == 0, violations


def covered_permissions(permission: str, catalog: Optional[Iterable[str]] = None) -> list[str]:
    """
    List the catalog permissions a grant covers, in catalog order.

    Defaults to every permission in the feature catalog.

    Example:
        covered_permissions("manage:users", ["view:users", "assign:user_roles"])
            -> ["view:users"]
    """
    if catalog is None:
        catalog = all_permissions()
    return [perm for perm in catalog if permission_covers(permission, perm)]
