"""
Pytest fixtures for the Seed Ledger test suite.

Each test gets an application built by ``create_app`` against its own
file-backed SQLite database, so schema creation runs exactly as it does at
service startup.
"""
import pytest
from fastapi.testclient import TestClient

from seed_ledger.config import Settings
from seed_ledger.main import create_app


@pytest.fixture
def static_dir(tmp_path):
    path = tmp_path / "public"
    path.mkdir()
    (path / "index.html").write_text("<html><body>Seed Inventory</body></html>", encoding="utf-8")
    (path / "app.js").write_text("console.log('seeds');", encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path, static_dir):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'seeds.db'}",
        db_pool_size=5,
        db_pool_timeout=5,
        static_dir=str(static_dir),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payloads():
    """One valid create payload per ledger."""
    return {
        "inward": {
            "seedName": "Tomato",
            "quantity": 12.5,
            "party": "Acme Farms",
            "date": "2024-03-01",
            "notes": "batch A",
        },
        "outward": {
            "seedName": "Chilli",
            "quantity": 4,
            "party": "Green Valley Co-op",
            "date": "2024-03-05",
            "notes": None,
        },
        "returns": {
            "seedName": "Okra",
            "quantity": 1.25,
            "reason": "Damaged packets",
            "date": "2024-03-07",
            "notes": "two cartons",
        },
        "expiry": {
            "seedName": "Brinjal",
            "quantity": 30,
            "expiryDate": "2024-06-30",
            "action": "Destroyed",
        },
    }
