"""
pytest fixtures for the friend graph API.

Every test gets a fresh in-memory SQLite database. The HTTP client shares
that database through a get_db override and authenticates with real JWTs.
"""
import itertools
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.auth.utils import create_access_token
from app.api.friends.models import Friendship
from app.api.users.models import User
from app.database.database import Base, enable_sqlite_foreign_keys, get_db
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Factory creating committed users; emails are unique per call."""
    counter = itertools.count(1)

    def _make_user(first_name, last_name=None, email=None, **kwargs):
        n = next(counter)
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email or f"user{n}@test.org",
            **kwargs
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def befriend(db):
    """Inserts an edge directly, bypassing the service rules."""

    def _befriend(requester, recipient, status="accepted", **kwargs):
        friendship = Friendship(user_a=requester.id, user_b=recipient.id, status=status, **kwargs)
        db.add(friendship)
        db.commit()
        db.refresh(friendship)
        return friendship

    return _befriend


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
