"""Unit tests for the feature catalog API."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from rishi_rbac import main
from rishi_rbac.core.config import settings


class TestFeatureCatalogEndpoints:
    def test_list_features(self, client: TestClient) -> None:
        resp = client.get("/api/features/list")
        assert resp.status_code == 200
        features = resp.json()
        assert len(features) == 7
        assert features[0]["id"] == "dashboard"
        assert features[0]["operations"][0]["permission"] == "view:dashboard"
        assert "subFeatures" in features[0]

    def test_list_services(self, client: TestClient) -> None:
        resp = client.get("/api/features/services")
        assert resp.status_code == 200
        assert "User Management" in resp.json()

    def test_list_permissions(self, client: TestClient) -> None:
        resp = client.get("/api/features/permissions")
        assert resp.status_code == 200
        assert "assign:role_permissions" in resp.json()

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}


class TestCheckEndpoint:
    HELD = ["manage:organizations:organization", "view:reports"]

    def test_allowed(self, client: TestClient) -> None:
        resp = client.post(
            "/api/features/check",
            json={"held": self.HELD, "required": "update:organizations:owned"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"allowed": True}

    def test_denied(self, client: TestClient) -> None:
        resp = client.post(
            "/api/features/check", json={"held": self.HELD, "required": "export:reports"}
        )
        assert resp.json() == {"allowed": False}

    def test_malformed_permission(self, client: TestClient) -> None:
        resp = client.post("/api/features/check", json={"held": self.HELD, "required": "nocolon"})
        assert resp.status_code == 400
        assert "nocolon" in resp.json()["detail"]

    def test_missing_required(self, client: TestClient) -> None:
        resp = client.post("/api/features/check", json={"held": self.HELD})
        assert resp.status_code == 422


class TestLoadRoleConfig:
    def test_no_file_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "role_config_file", None)
        main.load_role_config()

    def test_invalid_file_refuses_start(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "roles.yaml"
        path.write_text("roles:\n  admin:\n    - nocolon\n", encoding="utf-8")
        monkeypatch.setattr(settings, "role_config_file", str(path))
        with pytest.raises(main.RoleConfigurationError):
            main.load_role_config()

    def test_valid_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, role_yaml: str
    ) -> None:
        path = tmp_path / "roles.yaml"
        path.write_text(role_yaml, encoding="utf-8")
        monkeypatch.setattr(settings, "role_config_file", str(path))
        main.load_role_config()
