# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for health endpoints."""

import pytest
from fastapi.testclient import TestClient

from lms_admin import __version__
from lms_admin.api.app import create_app
from lms_admin.core.config import clear_settings_cache
from lms_admin.infrastructure.database import connection

pytestmark = pytest.mark.integration


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    clear_settings_cache()

    with TestClient(create_app()) as client:
        yield client


class TestHealthEndpoints:
    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["environment"] == "test"
        assert body["uptime_seconds"] >= 0

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["ready"] is True
        assert body["checks"]["database"]["status"] == "healthy"


def test_database_not_initialized(monkeypatch: pytest.MonkeyPatch):
    """Without a started database the session dependency answers 503."""
    monkeypatch.setattr(connection, "_sessionmaker", None)
    client = TestClient(create_app())

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "SERVICE_UNAVAILABLE"
