import os
import sys
from pathlib import Path

# Settings are read at import time; point them at throwaway values first.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("ENVIRONMENT", "development")

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from gymdesk.core.config import settings
from gymdesk.core.db import Base, build_engine, get_db
from gymdesk.main import app

engine = build_engine("sqlite://")
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(engine)


@pytest.fixture(autouse=True)
def override_db():
    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture(autouse=True)
def force_test_settings():
    original_env = settings.ENVIRONMENT
    original_secure = settings.COOKIE_SECURE
    settings.ENVIRONMENT = "development"
    settings.COOKIE_SECURE = False
    try:
        yield
    finally:
        settings.ENVIRONMENT = original_env
        settings.COOKIE_SECURE = original_secure


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def register(client: TestClient, username: str, password: str = "secret123"):
    return client.post(
        "/api/register",
        json={
            "username": username,
            "password": password,
            "name": username.title(),
            "email": f"{username}@example.com",
        },
    )


@pytest.fixture
def api_client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def owner_client():
    """Client logged in (via cookie) as a freshly registered owner."""
    with TestClient(app) as client:
        resp = register(client, "alice")
        assert resp.status_code == 201, resp.text
        yield client


@pytest.fixture
def other_client():
    with TestClient(app) as client:
        resp = register(client, "bob")
        assert resp.status_code == 201, resp.text
        yield client


GYM_PAYLOAD = {
    "name": "Fitness Plus",
    "address": "123 Main Street",
    "city": "Mumbai",
    "state": "Maharashtra",
    "zipcode": "400001",
    "phone": "9876543210",
}


@pytest.fixture
def gym(owner_client):
    resp = owner_client.post("/api/gyms", json=GYM_PAYLOAD)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def plan(owner_client, gym):
    resp = owner_client.post(
        f"/api/gyms/{gym['id']}/plans",
        json={"name": "Monthly Basic", "duration": 1, "price": 1500, "type": "monthly"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def member(owner_client, gym):
    resp = owner_client.post(
        f"/api/gyms/{gym['id']}/members",
        json={"name": "Asha Rao", "phone": "9000000001"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
