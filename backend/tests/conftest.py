"""Shared fixtures: fake AI client, in-memory database and FastAPI TestClient."""

import os
import tempfile

# Must run before dashboard_ai is imported: settings are read at import time.
os.environ["DATABASE_PATH"] = os.path.join(tempfile.mkdtemp(), "test.db")
os.environ["ANTHROPIC_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dashboard_ai.ai.client import AIClientError, Completion
from dashboard_ai.db.base import Base, get_db
from dashboard_ai.main import create_application
from dashboard_ai.models import ApiCost  # noqa: F401 - ensures models are registered

AUTH_HEADERS = {"Authorization": "Bearer test-token"}


class FakeCompletionClient:
    """Records every call and answers with a canned completion or error."""

    def __init__(self, completion: Completion | None = None, error: Exception | None = None):
        self.completion = completion or Completion(
            text="Paris is the capital of France.",
            model="fake-model",
            input_tokens=1_000,
            output_tokens=200,
        )
        self.error = error
        self.calls = []

    def complete(self, *, system, messages, max_tokens):
        self.calls.append({"system": system, "messages": list(messages), "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.completion


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite session shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def fake_ai_client():
    return FakeCompletionClient()


@pytest.fixture
def make_client(db_session):
    """Build a TestClient around an app wired to the given AI client."""

    def _make(ai_client=None, overrides=None, headers=None, settings=None):
        app = create_application(ai_client=ai_client, settings=settings)
        app.dependency_overrides[get_db] = lambda: db_session
        app.dependency_overrides.update(overrides or {})
        return TestClient(app, headers=AUTH_HEADERS if headers is None else headers)

    return _make


@pytest.fixture
def client(make_client, fake_ai_client):
    return make_client(fake_ai_client)


@pytest.fixture
def failing_ai_client():
    return FakeCompletionClient(error=AIClientError("rate limited"))


@pytest.fixture
def make_ai_client():
    return FakeCompletionClient
