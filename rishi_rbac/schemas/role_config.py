"""Role grant configuration schema."""
from pydantic import BaseModel, Field


class RoleConfig(BaseModel):
    """Declarative role grants, e.g. loaded from YAML.

    roles:
      field_manager:
        - manage:events:region
        - view:reports
    """

    roles: dict[str, list[str]] = Field(default_factory=dict)
