"""
Tests for the application wiring: health, CORS, error recovery and the
static frontend with SPA fallback.
"""

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.config import RELEASE, Settings
from api.main import PLACEHOLDER_TEXT, create_app
from shared.data_store import DataStore


class TestHealthEndpoint:
    """Tests for GET /api/health."""

    def test_health_check(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["mode"] == "debug"
        assert data["subscribers"] == 0

    def test_health_counts_follow_intake(self, client: TestClient):
        client.post("/api/subscribe", json={"email": "buyer@example.com"})

        data = client.get("/api/health").json()
        assert data["subscribers"] == 1
        assert data["audit_entries"] == 1


class TestCors:
    """Tests for the CORS configuration."""

    def test_allow_all_when_origin_unset(self, client: TestClient):
        response = client.get("/api/health", headers={"Origin": "http://anywhere.test"})

        assert response.headers["access-control-allow-origin"] in ("*", "http://anywhere.test")

    def test_configured_origin(self, frontend_dir: Path, data_store: DataStore):
        settings = Settings(frontend_path=frontend_dir, frontend_origin="https://vendoai.example")
        with TestClient(create_app(settings=settings, store=data_store)) as client:
            allowed = client.get("/api/health", headers={"Origin": "https://vendoai.example"})
            blocked = client.get("/api/health", headers={"Origin": "https://evil.example"})

        assert allowed.headers["access-control-allow-origin"] == "https://vendoai.example"
        assert "access-control-allow-origin" not in blocked.headers

    def test_preflight(self, frontend_dir: Path, data_store: DataStore):
        settings = Settings(frontend_path=frontend_dir, frontend_origin="https://vendoai.example")
        with TestClient(create_app(settings=settings, store=data_store)) as client:
            response = client.options("/api/subscribe", headers={
                "Origin": "https://vendoai.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            })

        assert response.status_code == 200
        assert response.headers["access-control-max-age"] == str(12 * 60 * 60)
        assert "POST" in response.headers["access-control-allow-methods"]


class TestErrorRecovery:
    """Tests for the global exception handler."""

    @pytest.fixture
    def failing_app(self, tmp_path: Path, data_store: DataStore):
        # No frontend build, so the catch-all route does not shadow /api/boom
        app = create_app(settings=Settings(frontend_path=tmp_path / "missing"), store=data_store)

        @app.post("/api/boom")
        def boom():
            raise RuntimeError("kaboom")

        return app

    def test_unhandled_error_becomes_500(self, failing_app):
        with TestClient(failing_app, raise_server_exceptions=False) as client:
            response = client.post("/api/boom")
            assert response.status_code == 500
            assert response.json() == {"error": "internal server error"}

            # The application keeps serving requests
            assert client.get("/api/health").status_code == 200

    def test_failed_request_is_access_logged(self, failing_app, caplog):
        caplog.set_level(logging.INFO, logger="access")

        with TestClient(failing_app, raise_server_exceptions=False) as client:
            client.post("/api/boom")

        assert any("POST /api/boom -> 500" in message for message in caplog.messages)

    def test_successful_request_is_access_logged(self, client: TestClient, caplog):
        caplog.set_level(logging.INFO, logger="access")

        client.get("/api/health")

        assert any("GET /api/health -> 200" in message for message in caplog.messages)


class TestFrontend:
    """Tests for static file serving and SPA fallback."""

    def test_root_serves_index(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert "VendoAI index" in response.text

    def test_serves_existing_asset(self, client: TestClient):
        response = client.get("/assets/app.js")

        assert response.status_code == 200
        assert "console.log" in response.text

    def test_unknown_path_falls_back_to_index(self, client: TestClient):
        response = client.get("/pricing/enterprise")

        assert response.status_code == 200
        assert "VendoAI index" in response.text

    def test_non_get_unknown_path_falls_back_to_index(self, client: TestClient):
        response = client.post("/pricing")

        assert response.status_code == 200
        assert "VendoAI index" in response.text

    def test_api_routes_take_precedence(self, client: TestClient):
        response = client.get("/api/vendors/search")

        assert isinstance(response.json(), list)

    def test_path_escape_falls_back_to_index(self, client: TestClient):
        response = client.get("/..%2F..%2Fetc%2Fpasswd")

        assert response.status_code == 200
        assert "VendoAI index" in response.text

    def test_missing_build_serves_placeholder(self, tmp_path: Path, data_store: DataStore):
        settings = Settings(frontend_path=tmp_path / "missing")
        with TestClient(create_app(settings=settings, store=data_store)) as client:
            response = client.get("/")

        assert response.status_code == 200
        assert response.text == PLACEHOLDER_TEXT
        assert response.headers["content-type"].startswith("text/plain")


class TestReleaseMode:
    """Tests for release-mode behaviour."""

    def test_docs_disabled(self, tmp_path: Path, data_store: DataStore):
        settings = Settings(frontend_path=tmp_path / "missing", mode=RELEASE)
        with TestClient(create_app(settings=settings, store=data_store)) as client:
            assert client.get("/docs").status_code == 404
            assert client.get("/api/health").json()["mode"] == "release"

    def test_docs_enabled_in_debug(self, tmp_path: Path, data_store: DataStore):
        settings = Settings(frontend_path=tmp_path / "missing")
        with TestClient(create_app(settings=settings, store=data_store)) as client:
            assert client.get("/docs").status_code == 200
