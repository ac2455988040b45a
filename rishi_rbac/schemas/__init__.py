from .feature import Feature, FeatureOperation, PermissionCheckRequest, PermissionCheckResponse
from .role_config import RoleConfig

__all__ = [
    "Feature",
    "FeatureOperation",
    "PermissionCheckRequest",
    "PermissionCheckResponse",
    "RoleConfig",
]
