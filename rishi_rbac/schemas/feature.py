"""Feature catalog schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FeatureOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    permission: str


class Feature(BaseModel):
    id: str
    name: str
    description: str
    operations: tuple[FeatureOperation, ...] = ()
    sub_features: Optional[tuple["Feature", ...]] = Field(default=None, alias="subFeatures")
    service: str
    route: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


Feature.model_rebuild()


class PermissionCheckRequest(BaseModel):
    held: list[str] = Field(default_factory=list)
    required: str = Field(..., min_length=1)


class PermissionCheckResponse(BaseModel):
    allowed: bool
