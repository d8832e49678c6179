"""
Shared test fixtures: every test gets its own app bound to a throwaway
SQLite file, so tests never touch Reviews.db or each other's rows.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        app_name="Test Book Reviews API",
        database_url=f"sqlite:///{tmp_path / 'reviews.db'}",
        log_level="DEBUG",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add_review(client: TestClient):
    """Create a review through the API and return its JSON body."""

    def _add(title: str, rating: float) -> dict:
        response = client.post("/api/reviews", json={"title": title, "rating": rating})
        assert response.status_code == 201, response.text
        return response.json()

    return _add
