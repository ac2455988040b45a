import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rishi_rbac.api.v1 import router as api_v1_router
from rishi_rbac.core.config import settings
from rishi_rbac.core.permission_registry import all_permissions, list_features
from rishi_rbac.services.role_config_parser import RoleConfigParser

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


class RoleConfigurationError(RuntimeError):
    pass


def load_role_config() -> None:
    """Validate the configured role grants, refusing to start on errors."""
    if not settings.role_config_file:
        return

    config, validation = RoleConfigParser.load_file(
        settings.role_config_file, strict=settings.strict_permission_validation
    )
    for warning in validation.warnings:
        logger.warning("Role configuration warning %s", warning)
    if not validation.is_valid:
        raise RoleConfigurationError(
            f"Invalid role configuration in {settings.role_config_file}: "
            + "; ".join(str(error) for error in validation.errors)
        )
    logger.info("Loaded grants for %d roles", len(config.roles))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Feature catalog ready: %d features, %d permissions",
        len(list_features()),
        len(all_permissions()),
    )
    load_role_config()
    yield


app = FastAPI(
    title="Rishi RBAC",
    description="Permission catalog and coverage checks",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(api_v1_router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "healthy"}
