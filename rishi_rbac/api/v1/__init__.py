"""API v1 router - permission catalog and checks."""
from fastapi import APIRouter

from .endpoints import features

router = APIRouter()

router.include_router(features.router)
