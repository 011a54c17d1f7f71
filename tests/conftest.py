import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import jobtracker.models  # noqa: F401
from jobtracker.core.rate_limiter import rate_limiter
from jobtracker.database import Base, get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.main import app

USER_A = "user-a"
USER_B = "user-b"


def auth(user_id: str) -> dict:
    return {"x-user-id": user_id}


@pytest.fixture
def user_id() -> str:
    return "user-1"


@pytest.fixture
def client(user_id: str):
    """Client with a stub session; router tests monkeypatch the repo calls."""

    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user_id] = lambda: user_id
    rate_limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_client(session_factory):
    """Client backed by an in-memory SQLite database and the real x-user-id header auth."""

    def _db_override():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _db_override
    rate_limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_job(db_client):
    """POST a job as user_id and return the response JSON."""

    def _make(user_id: str = USER_A, **extra) -> dict:
        body = {"title": "Backend Engineer", "company": "ACME", "url": "https://acme.test/jobs/1", **extra}
        resp = db_client.post("/jobs", json=body, headers=auth(user_id))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
