"""Conversion between permission strings and PermissionFeature values.

Wire format: ``action:resource`` or ``action:resource:scope``, lowercase, with
no escaping of ``:`` inside segments. Stored role grants depend on this
format, so it must stay stable.
"""
from typing import Iterable, Optional

from rishi_rbac.core.exceptions import MalformedPermissionError, UnknownPermissionValueError
from rishi_rbac.core.vocabulary import (
    ACTION_VALUES,
    ALL_RESOURCES,
    RESOURCE_VALUES,
    SCOPE_VALUES,
    PermissionFeature,
)

SEPARATOR = ":"


def serialize_permission(feature: PermissionFeature) -> str:
    """
    Convert a permission feature to its string form.

    The feature is trusted as given; no enum membership checks are made.

    Examples:
        serialize_permission(PermissionFeature("view", "users")) -> "view:users"
        serialize_permission(PermissionFeature("manage", "events", "organization"))
            -> "manage:events:organization"
    """
    if feature.scope:
        return f"{feature.action}{SEPARATOR}{feature.resource}{SEPARATOR}{feature.scope}"
    return f"{feature.action}{SEPARATOR}{feature.resource}"


def parse_permission(permission: str) -> PermissionFeature:
    """
    Parse a permission string into a PermissionFeature.

    Segment values are not checked against the known actions, resources and
    scopes. Unknown values parse fine and never match anything during coverage
    checks. Use validate_permission() where strict checking is wanted.

    Args:
        permission: Permission string, e.g. "view:users:owned"

    Returns:
        PermissionFeature with action, resource and optional scope

    Raises:
        MalformedPermissionError: If fewer than two segments are present
    """
    parts = permission.split(SEPARATOR)

    if len(parts) < 2:
        raise MalformedPermissionError(permission)

    action = parts[0]
    resource = parts[1]
    # An empty third segment is treated as unscoped
    scope = parts[2] if len(parts) > 2 and parts[2] else None

    return PermissionFeature(action=action, resource=resource, scope=scope)


def validate_permission(
    permission: str, resources: Optional[Iterable[str]] = None
) -> PermissionFeature:
    """
    Parse a permission string and check its segments against the vocabulary.

    Intended for configuration time, e.g. before a grant is stored on a role.
    Actions and scopes are always checked. Resources are checked only when
    ``resources`` is given, since catalog permissions use resource names
    ("users", "user_roles") that are not ResourceType members. The ``all``
    wildcard is always accepted.

    Args:
        permission: Permission string to check
        resources: Accepted resource names, or None to skip the resource check

    Raises:
        MalformedPermissionError: Wrong number of segments or an empty segment
        UnknownPermissionValueError: A segment is not a known action, resource or scope
    """
    parts = permission.split(SEPARATOR)
    if len(parts) > 3 or any(not part for part in parts):
        raise MalformedPermissionError(permission)

    feature = parse_permission(permission)

    if feature.action not in ACTION_VALUES:
        raise UnknownPermissionValueError(permission, "action", feature.action)
    if resources is not None and not is_known_resource(feature.resource, resources):
        raise UnknownPermissionValueError(permission, "resource", feature.resource)
    if feature.scope is not None and feature.scope not in SCOPE_VALUES:
        raise UnknownPermissionValueError(permission, "scope", feature.scope)

    return feature


def is_known_resource(resource: str, resources: Optional[Iterable[str]] = None) -> bool:
    """Whether ``resource`` is the ``all`` wildcard or one of ``resources``.

    ``resources`` defaults to the ResourceType values.
    """
    if resource == ALL_RESOURCES:
        return True
    return resource in (RESOURCE_VALUES if resources is None else set(resources))
