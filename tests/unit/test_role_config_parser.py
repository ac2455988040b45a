"""Unit tests for role grant configuration parsing."""

from __future__ import annotations

from pathlib import Path

from rishi_rbac.services.role_config_parser import RoleConfigParser


class TestParseAndValidate:
    def test_valid_config(self, role_yaml: str) -> None:
        config, validation = RoleConfigParser.parse_and_validate(role_yaml, strict=True)
        assert validation.is_valid
        assert validation.warnings == []
        assert config.roles["field_manager"] == [
            "manage:events:region",
            "manage:agents:region",
            "view:reports",
        ]

    def test_malformed_grant_is_error(self) -> None:
        config, validation = RoleConfigParser.parse_and_validate(
            "roles:\n  admin:\n    - view:users\n    - nocolon\n"
        )
        assert config is not None
        assert not validation.is_valid
        assert validation.errors[0].path == "roles.admin[1]"
        assert "nocolon" in str(validation.errors[0])

    def test_unknown_action_is_warning_by_default(self) -> None:
        _, validation = RoleConfigParser.parse_and_validate("roles:\n  admin:\n    - fly:users\n")
        assert validation.is_valid
        assert len(validation.warnings) == 1
        assert "fly" in validation.warnings[0]

    def test_unknown_action_is_error_when_strict(self) -> None:
        _, validation = RoleConfigParser.parse_and_validate(
            "roles:\n  admin:\n    - fly:users\n", strict=True
        )
        assert not validation.is_valid

    def test_resources_include_catalog_and_resource_types(self) -> None:
        _, validation = RoleConfigParser.parse_and_validate(
            "roles:\n  admin:\n    - view:event\n    - view:user_roles\n    - view:widgets\n",
            strict=True,
        )
        assert len(validation.errors) == 1
        assert validation.errors[0].path == "roles.admin[2]"

    def test_explicit_resources(self) -> None:
        _, validation = RoleConfigParser.parse_and_validate(
            "roles:\n  admin:\n    - view:widgets\n", strict=True, resources={"widgets"}
        )
        assert validation.is_valid

    def test_invalid_yaml(self) -> None:
        config, validation = RoleConfigParser.parse_and_validate("roles: [")
        assert config is None
        assert validation.errors[0].path == "root"

    def test_non_mapping(self) -> None:
        config, validation = RoleConfigParser.parse_and_validate("- view:users\n")
        assert config is None
        assert not validation.is_valid

    def test_wrong_shape(self) -> None:
        config, validation = RoleConfigParser.parse_and_validate("roles:\n  admin: 5\n")
        assert config is None
        assert "Schema validation failed" in validation.errors[0].message

    def test_empty_document(self) -> None:
        config, validation = RoleConfigParser.parse_and_validate("")
        assert validation.is_valid
        assert config.roles == {}


class TestLoadFile:
    def test_reads_yaml_file(self, tmp_path: Path, role_yaml: str) -> None:
        path = tmp_path / "roles.yaml"
        path.write_text(role_yaml, encoding="utf-8")
        config, validation = RoleConfigParser.load_file(str(path))
        assert validation.is_valid
        assert set(config.roles) == {"super_admin", "field_manager", "brand_agent"}
