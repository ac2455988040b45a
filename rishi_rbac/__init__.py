"""Rishi RBAC permission model: permission strings, coverage checks and the feature catalog."""
from rishi_rbac.core.codec import parse_permission, serialize_permission, validate_permission
from rishi_rbac.core.exceptions import (
    MalformedPermissionError,
    PermissionFormatError,
    UnknownPermissionValueError,
)
from rishi_rbac.core.permission_registry import (
    APPLICATION_FEATURES,
    Services,
    all_permissions,
    list_features,
    standard_operations,
)
from rishi_rbac.core.permissions import (
    check_permission,
    covered_permissions,
    permission_covers,
    scope_covers,
    validate_permission_subset,
)
from rishi_rbac.core.vocabulary import (
    ALL_RESOURCES,
    ActionType,
    PermissionFeature,
    PermissionScope,
    ResourceType,
)
from rishi_rbac.schemas.feature import Feature, FeatureOperation

__version__ = "0.1.0"

__all__ = [
    "ALL_RESOURCES",
    "APPLICATION_FEATURES",
    "ActionType",
    "Feature",
    "FeatureOperation",
    "MalformedPermissionError",
    "PermissionFeature",
    "PermissionFormatError",
    "PermissionScope",
    "ResourceType",
    "Services",
    "UnknownPermissionValueError",
    "all_permissions",
    "check_permission",
    "covered_permissions",
    "list_features",
    "parse_permission",
    "permission_covers",
    "scope_covers",
    "serialize_permission",
    "standard_operations",
    "validate_permission",
    "validate_permission_subset",
]
