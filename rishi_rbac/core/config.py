from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Role grants
    # When True, unknown actions/resources/scopes in role grants are errors, not warnings
    strict_permission_validation: bool = False
    role_config_file: Optional[str] = None  # Path to YAML role grants, validated on startup

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
