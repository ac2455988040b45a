"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from rishi_rbac.main import app


@pytest.fixture
def client() -> TestClient:
    """Test client for the application, lifespan included."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def role_yaml() -> str:
    """Role grants taken from a typical booking deployment."""
    return """
roles:
  super_admin:
    - manage:all
    - view:all
  field_manager:
    - manage:events:region
    - manage:agents:region
    - view:reports
  brand_agent:
    - view:events:assigned
    - update:events:assigned
"""
