"""Tests for the system routes."""

import pytest


@pytest.mark.unit
class TestSystemRoutes:
    """Test /health and /version."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_version_reports_git_sha(self, client, settings):
        settings.GIT_SHA = "abc123"

        response = client.get("/version")

        assert response.json() == {"version": "abc123"}
