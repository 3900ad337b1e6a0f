"""
Pytest fixtures for the Civic Reports API.

Each test gets a fresh in-memory SQLite database wired into the app through
the get_db dependency override.
"""

import os
from collections.abc import Iterator

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from civic_reports.db.session import get_db, init_db  # noqa: E402
from civic_reports.main import create_app  # noqa: E402


@pytest.fixture
def test_db() -> Iterator[sessionmaker]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture
def client(test_db) -> Iterator[TestClient]:
    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = test_db()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c


@pytest.fixture
def create_issue(client):
    def _create(**fields) -> dict:
        resp = client.post("/api/issues", json=fields)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
