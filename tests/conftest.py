"""Pytest fixtures — file-backed SQLite database recreated for every test."""
import os

# Must be set before roster_api.config is imported.
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["SSE_HEARTBEAT_SECONDS"] = "0.01"

import pytest
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from roster_api.database import Base, engine, get_db
from roster_api.main import app

# Import all models so they register with Base.metadata
from roster_api.models.user import User        # noqa: F401
from roster_api.models.roster import Roster    # noqa: F401

ADMIN_PASSWORD = "admin123"

SAMPLE_DATA = {
    "monday": {
        "morning": [{"name": "Jane Doe"}, {"name": "Sam Lee"}],
        "evening": [{"name": "Ana Ruiz"}],
        "instructions": "Medication at 9am",
    },
    "tuesday": {
        "morning": [{"name": "Sam Lee"}],
        "evening": [{"name": "Jane Doe"}],
        "instructions": "",
    },
}
SAMPLE_ACTIVE_DAYS = {
    "monday": True,
    "tuesday": True,
    "wednesday": False,
    "thursday": False,
    "friday": False,
    "saturday": False,
    "sunday": False,
}


@pytest.fixture(scope="function")
def db_engine():
    """Create the schema on the application engine for each test."""
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session for direct assertions against the tables."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient; startup seeds the admin account."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def admin_client(client):
    """TestClient already carrying an admin session cookie."""
    login_admin(client)
    return client


@pytest.fixture(scope="function")
def carer_client(client):
    """TestClient already carrying a carer session cookie."""
    login_carer(client, "Jane Doe")
    return client


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def login_admin(client: TestClient, password: str = ADMIN_PASSWORD) -> dict:
    """Helper — POST /api/auth/login as the seeded admin and return response JSON."""
    resp = client.post("/api/auth/login", json={"username": "admin", "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


def login_carer(client: TestClient, name: str) -> dict:
    """Helper — POST /api/auth/carer-login and return response JSON."""
    resp = client.post("/api/auth/carer-login", json={"name": name})
    assert resp.status_code == 200, resp.text
    return resp.json()


def create_test_roster(client: TestClient, name: str = "Week 1", data: dict = None,
                       active_days: dict = None) -> int:
    """Helper — POST /api/roster (caller must hold an admin cookie) and return the new id."""
    resp = client.post("/api/roster", json={
        "name": name,
        "data": data or SAMPLE_DATA,
        "activeDays": active_days or SAMPLE_ACTIVE_DAYS,
    })
    assert resp.status_code == 200, resp.text
    return resp.json()["rosterId"]
