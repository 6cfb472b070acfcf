"""Pytest fixtures and configuration for CRMPro tests."""

import pytest
import uuid
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from crmpro.auth.jwt import SessionTokens
from crmpro.database.store import InMemoryStore
from crmpro.integrations.email import Notifier
from crmpro.models.user import User
from crmpro.services.auth_service import AuthService


TEST_JWT_SECRET = "test-secret"


@pytest.fixture
def store():
    """Create an empty in-memory store for testing."""
    return InMemoryStore()


@pytest.fixture
def notifier():
    """Create a notifier whose outbox the tests can inspect."""
    return Notifier(sender="CRMPro Test <test@crmpro.com>")


@pytest.fixture
def session_tokens():
    """Token capability signed with a test-only secret."""
    return SessionTokens(secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_service(store, notifier, session_tokens):
    """Create an AuthService wired to the test doubles."""
    return AuthService(store, notifier, session_tokens)


@pytest.fixture
def sample_user_base():
    """Base user data for seeding the store.

    Returns a dict with default user attributes that can be overridden.
    """
    now = datetime.utcnow()
    return {
        "id": str(uuid.uuid4()),
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "company": "Navy",
        "phone": None,
        "plan": "Profesyonel",
        "verified": True,
        "verification_token": None,
        "password": "cobol",
        "created_at": now,
        "trial_ends_at": now + timedelta(days=14),
    }


@pytest.fixture
def seed_user(store):
    """Write a user straight into the store, bypassing registration."""
    def _seed(**fields) -> User:
        user = User(**fields)
        doc = store.read()
        doc.users.append(user)
        store.write(doc)
        return user
    return _seed


@pytest.fixture
def test_client(store, notifier, session_tokens):
    """Create a FastAPI test client with overridden store, notifier and tokens."""
    from crmpro.api.app import app
    from crmpro.auth.jwt import get_session_tokens
    from crmpro.database.store import get_store
    from crmpro.integrations.email import get_notifier

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_session_tokens] = lambda: session_tokens

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
