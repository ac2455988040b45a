"""
Canonical catalog of application features and the permissions they carry.

Each feature is a named capability area ("Users", "Events") with the
operations a role can be granted. Every operation carries one permission
string ``action:resource``. Scope is chosen when granting and is NOT part of
this catalog.

The catalog is built once at import time and never mutated. Whether a feature
is enabled for an organization is stored elsewhere.
"""
from collections.abc import Iterable, Iterator
from typing import Optional

from rishi_rbac.core.codec import parse_permission, serialize_permission
from rishi_rbac.core.vocabulary import ActionType, PermissionFeature
from rishi_rbac.schemas.feature import Feature, FeatureOperation


# Service areas used to group features in the permission matrix
class Services:
    CORE = "Core"
    USER_MANAGEMENT = "User Management"
    FIELD_OPERATIONS = "Field Operations"
    EVENT_MANAGEMENT = "Event Management"
    INVENTORY = "Inventory"
    CLIENT_MANAGEMENT = "Client Management"
    REPORTING = "Reporting"
    MARKETING = "Marketing"


STANDARD_ACTIONS = (ActionType.VIEW, ActionType.CREATE, ActionType.UPDATE, ActionType.DELETE)


def standard_operations(resource_name: str) -> list[FeatureOperation]:
    """Build the view/create/update/delete operations for a resource."""
    return [
        FeatureOperation(
            id=action.value,
            name=action.value.capitalize(),
            description=f"{action.value.capitalize()} {resource_name}",
            permission=serialize_permission(PermissionFeature(action, resource_name)),
        )
        for action in STANDARD_ACTIONS
    ]


def _operation(op_id: str, name: str, description: str, permission: str) -> FeatureOperation:
    return FeatureOperation(id=op_id, name=name, description=description, permission=permission)


APPLICATION_FEATURES: tuple[Feature, ...] = (
    # --- Core ---
    Feature(
        id="dashboard",
        name="Dashboard",
        description="System dashboard and overview",
        operations=(_operation("view", "View", "View dashboard", "view:dashboard"),),
        service=Services.CORE,
        route="/dashboard",
    ),
    # --- User management ---
    Feature(
        id="users",
        name="Users",
        description="User management",
        operations=(
            *standard_operations("users"),
            _operation("assign_role", "Assign Role", "Assign roles to users", "assign:user_roles"),
        ),
        service=Services.USER_MANAGEMENT,
        route="/users",
    ),
    Feature(
        id="roles",
        name="Roles & Permissions",
        description="Role and permission management",
        operations=(
            *standard_operations("roles"),
            _operation(
                "assign_permission",
                "Assign Permission",
                "Assign permissions to roles",
                "assign:role_permissions",
            ),
        ),
        service=Services.USER_MANAGEMENT,
        route="/admin/rbac",
    ),
    Feature(
        id="organizations",
        name="Organizations",
        description="Organization management",
        operations=(
            *standard_operations("organizations"),
            _operation(
                "assign_users",
                "Assign Users",
                "Assign users to organizations",
                "assign:organization_users",
            ),
        ),
        service=Services.USER_MANAGEMENT,
        route="/organizations",
    ),
    # --- Event management ---
    Feature(
        id="events",
        name="Events",
        description="Event management",
        operations=(
            *standard_operations("events"),
            _operation("approve", "Approve", "Approve events", "approve:events"),
            _operation("assign_agents", "Assign Agents", "Assign agents to events", "assign:event_agents"),
        ),
        service=Services.EVENT_MANAGEMENT,
        route="/bookings",
    ),
    # --- Field operations ---
    Feature(
        id="agents",
        name="Brand Agents",
        description="Brand agent management",
        operations=(
            *standard_operations("agents"),
            _operation(
                "assign_schedule",
                "Assign Schedule",
                "Assign schedules to agents",
                "assign:agent_schedules",
            ),
        ),
        service=Services.FIELD_OPERATIONS,
        route="/agents",
    ),
    # --- Reporting ---
    Feature(
        id="reports",
        name="Reports",
        description="Reporting and analytics",
        operations=(
            *standard_operations("reports"),
            _operation("export", "Export", "Export reports", "export:reports"),
        ),
        service=Services.REPORTING,
        route="/reports",
    ),
)


def list_features() -> tuple[Feature, ...]:
    """Return the full catalog, nested sub-features included."""
    return APPLICATION_FEATURES


def iter_features(features: Optional[Iterable[Feature]] = None) -> Iterator[Feature]:
    """Walk features depth-first, parents before their sub-features."""
    for feature in APPLICATION_FEATURES if features is None else features:
        yield feature
        if feature.sub_features:
            yield from iter_features(feature.sub_features)


def iter_operations(features: Optional[Iterable[Feature]] = None) -> Iterator[FeatureOperation]:
    for feature in iter_features(features):
        yield from feature.operations


def all_permissions(features: Optional[Iterable[Feature]] = None) -> list[str]:
    """Every distinct permission string in the catalog, sorted."""
    return sorted({op.permission for op in iter_operations(features)})


def list_services(features: Optional[Iterable[Feature]] = None) -> list[str]:
    return sorted({feature.service for feature in iter_features(features)})


def features_by_service(service: str) -> list[Feature]:
    return [feature for feature in iter_features() if feature.service == service]


def get_feature(feature_id: str) -> Optional[Feature]:
    for feature in iter_features():
        if feature.id == feature_id:
            return feature
    return None


def catalog_resources(features: Optional[Iterable[Feature]] = None) -> set[str]:
    """Resource names used by catalog permissions, e.g. "users", "user_roles"."""
    return {parse_permission(op.permission).resource for op in iter_operations(features)}
