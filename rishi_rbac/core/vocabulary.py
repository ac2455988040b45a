"""Permission vocabulary: resources, actions, scopes and the permission shape.

Permission strings take the form ``action:resource[:scope]``, e.g.
``view:users``, ``manage:events:organization``, ``approve:reports:assigned``.
"""
import enum
from dataclasses import dataclass
from typing import Optional


class ResourceType(str, enum.Enum):
    SYSTEM = "system"
    USER = "user"
    ORGANIZATION = "organization"
    CLIENT = "client"
    EVENT = "event"
    AGENT = "agent"
    KIT = "kit"
    DISPENSARY = "dispensary"
    REPORT = "report"
    SCHEDULE = "schedule"
    MARKETING = "marketing"
    DASHBOARD = "dashboard"
    PROFILE = "profile"
    ROLE = "role"
    AUDIT = "audit"
    NOTIFICATION = "notification"


class ActionType(str, enum.Enum):
    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"
    ASSIGN = "assign"
    APPROVE = "approve"
    EXPORT = "export"
    IMPORT = "import"


class PermissionScope(str, enum.Enum):
    ALL = "all"  # Every item of the resource type
    ORGANIZATION = "organization"  # Items in the user's current organization
    REGION = "region"  # Items in the user's assigned regions
    OWNED = "owned"  # Items created/owned by the user
    ASSIGNED = "assigned"  # Items assigned to the user


# Wildcard resource. Only valid in the resource position, never a ResourceType.
ALL_RESOURCES = "all"

# Actions implied by a "manage" grant on the same resource
MANAGE_IMPLIED_ACTIONS = frozenset(
    {
        ActionType.VIEW.value,
        ActionType.CREATE.value,
        ActionType.UPDATE.value,
        ActionType.DELETE.value,
    }
)

RESOURCE_VALUES = frozenset(r.value for r in ResourceType)
ACTION_VALUES = frozenset(a.value for a in ActionType)
SCOPE_VALUES = frozenset(s.value for s in PermissionScope)


@dataclass(frozen=True)
class PermissionFeature:
    """Structured form of a permission string.

    Fields hold plain strings so that values outside the enumerations survive
    parsing and simply fail to match during coverage checks. A ``scope`` of
    ``None`` means unscoped.
    """

    action: str
    resource: str
    scope: Optional[str] = None

    def __post_init__(self):
        # Accept enum members but store their string values
        for name in ("action", "resource", "scope"):
            value = getattr(self, name)
            if isinstance(value, enum.Enum):
                object.__setattr__(self, name, value.value)

