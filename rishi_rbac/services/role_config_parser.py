"""
Role grant configuration parser and validator
Rejects malformed grants when roles are configured, not when permissions are checked
"""
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from rishi_rbac.core.codec import validate_permission
from rishi_rbac.core.exceptions import MalformedPermissionError, UnknownPermissionValueError
from rishi_rbac.core.permission_registry import catalog_resources
from rishi_rbac.core.vocabulary import RESOURCE_VALUES
from rishi_rbac.schemas.role_config import RoleConfig

logger = logging.getLogger(__name__)


class RoleConfigValidationError:
    """Role configuration validation error"""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message

    def __str__(self):
        return f"{self.path}: {self.message}"


class RoleConfigValidation:
    """Role configuration validation result"""

    def __init__(self):
        self.errors: list[RoleConfigValidationError] = []
        self.warnings: list[str] = []

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


class RoleConfigParser:
    """Parser and validator for declarative role grants"""

    @staticmethod
    def parse_and_validate(
        config_yaml: str,
        strict: bool = False,
        resources: Optional[Iterable[str]] = None,
    ) -> tuple[Optional[RoleConfig], RoleConfigValidation]:
        """
        Parse and validate role grant configuration

        Args:
            config_yaml: YAML configuration string
            strict: If True, unknown actions, resources and scopes are errors
                rather than warnings
            resources: Accepted resource names. Defaults to the ResourceType
                values plus the resource names used by the feature catalog

        Returns:
            Tuple of (parsed config, validation result). The config is None
            when the YAML or its shape is invalid.
        """
        validation = RoleConfigValidation()

        try:
            config_dict = yaml.safe_load(config_yaml) or {}
        except yaml.YAMLError as e:
            validation.errors.append(RoleConfigValidationError("root", f"Invalid YAML: {str(e)}"))
            return None, validation

        if not isinstance(config_dict, dict):
            validation.errors.append(
                RoleConfigValidationError("root", "Configuration must be a mapping")
            )
            return None, validation

        try:
            config = RoleConfig(**config_dict)
        except ValidationError as e:
            validation.errors.append(
                RoleConfigValidationError("root", f"Schema validation failed: {str(e)}")
            )
            return None, validation

        if resources is None:
            resources = RESOURCE_VALUES | catalog_resources()
        known_resources = set(resources)

        for role_name, grants in config.roles.items():
            for index, grant in enumerate(grants):
                RoleConfigParser._validate_grant(
                    f"roles.{role_name}[{index}]", grant, strict, known_resources, validation
                )

        for error in validation.errors:
            logger.warning("Role configuration error %s", error)

        return config, validation

    @staticmethod
    def _validate_grant(
        path: str,
        grant: str,
        strict: bool,
        resources: set[str],
        validation: RoleConfigValidation,
    ) -> None:
        try:
            validate_permission(grant, resources)
        except UnknownPermissionValueError as e:
            if strict:
                validation.errors.append(RoleConfigValidationError(path, str(e)))
            else:
                validation.warnings.append(f"{path}: {e}")
        except MalformedPermissionError as e:
            validation.errors.append(RoleConfigValidationError(path, str(e)))

    @staticmethod
    def load_file(
        path: str, strict: bool = False
    ) -> tuple[Optional[RoleConfig], RoleConfigValidation]:
        """Read a YAML file and validate it"""
        return RoleConfigParser.parse_and_validate(
            Path(path).read_text(encoding="utf-8"), strict=strict
        )
