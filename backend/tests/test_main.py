"""Tests for the application entry point."""

from fastapi.testclient import TestClient

from app.main import app


class TestHealth:
    """Tests for /health."""

    def test_health(self):
        data = TestClient(app).get("/health").json()

        assert data["status"] == "healthy"
        assert data["exports_running"] == 0

    def test_no_static_frontend(self):
        assert TestClient(app).get("/").status_code == 404
