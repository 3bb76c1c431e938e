"""
Shared pytest fixtures for the VendoAI backend tests.

These fixtures provide a fresh store and application per test so no state
leaks between tests.
"""

import pytest
from pathlib import Path

from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app
from shared.data_store import DataStore


@pytest.fixture
def data_dir() -> Path:
    """Path to the vendor fixture directory."""
    return Path(__file__).parent.parent / "shared" / "data"


@pytest.fixture
def data_store(data_dir: Path) -> DataStore:
    """Fresh DataStore instance for each test."""
    return DataStore(data_dir=data_dir)


@pytest.fixture
def frontend_dir(tmp_path: Path) -> Path:
    """A minimal frontend build with an index and one asset."""
    build = tmp_path / "build"
    (build / "assets").mkdir(parents=True)
    (build / "index.html").write_text("<html><body>VendoAI index</body></html>")
    (build / "assets" / "app.js").write_text("console.log('vendoai');")
    return build


@pytest.fixture
def settings(frontend_dir: Path) -> Settings:
    """Settings pointing at the temporary frontend build."""
    return Settings(frontend_path=frontend_dir)


@pytest.fixture
def app(settings: Settings, data_store: DataStore):
    """Application wired to the fresh store."""
    return create_app(settings=settings, store=data_store)


@pytest.fixture
def client(app) -> TestClient:
    """Test client for the application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def contact_payload() -> dict:
    return {"name": "Asha Rao", "email": "asha@example.com", "message": "Tell me more."}


@pytest.fixture
def demo_payload() -> dict:
    """Demo request with only the required fields."""
    return {"name": "Vikram Shah", "email": "vikram@acme.io", "company": "Acme"}
