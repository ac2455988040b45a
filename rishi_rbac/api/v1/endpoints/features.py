"""Feature catalog API endpoints."""
import logging

from fastapi import APIRouter, HTTPException

from rishi_rbac.core.exceptions import PermissionFormatError
from rishi_rbac.core.permission_registry import all_permissions, list_features, list_services
from rishi_rbac.core.permissions import check_permission
from rishi_rbac.schemas import (
    Feature,
    PermissionCheckRequest,
    PermissionCheckResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/features", tags=["features"])


@router.get("/list", response_model=list[Feature])
async def get_features():
    """Return the feature catalog, nested sub-features included."""
    return list(list_features())


@router.get("/services", response_model=list[str])
async def get_services():
    """Return the service areas features are grouped under."""
    return list_services()


@router.get("/permissions", response_model=list[str])
async def get_permissions():
    """Return every permission string the catalog can grant."""
    return all_permissions()


@router.post("/check", response_model=PermissionCheckResponse)
async def check(request: PermissionCheckRequest):
    """
    Check whether a set of held grants covers a required permission.

    The caller supplies the held grants; nothing is looked up here.
    """
    try:
        allowed = check_permission(request.held, request.required)
    except PermissionFormatError as e:
        logger.info("Rejected permission check: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return PermissionCheckResponse(allowed=allowed)
