"""
Shared pytest fixtures for the task list client test suite.

Provides the Flask app and test client, a recorder that replaces
``requests.request`` inside the API client, and ready-made session and
synchronizer objects bound to an in-memory token store. No test talks to
a live task API.

Key SDET Concepts Demonstrated:
- Fixture scoping (session vs. function) for performance and isolation
- Monkeypatching outbound HTTP with a recording fake
- Test data factories built on Faker
"""

from __future__ import annotations

import os

import pytest
from faker import Faker

os.environ["FLASK_ENV"] = "testing"

from client_app import create_app
from client_app.api import TaskApiClient
from client_app.session import SessionContext
from client_app.storage import TOKEN_KEY, TokenStore
from client_app.synchronizer import TaskListSynchronizer
from tests.helpers import API_URL, TEST_TOKEN, RecordingRequests

fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(scope="session")
def app():
    """
    Provide the Flask application instance for the entire test session.

    Created once with the 'testing' config, whose ``TASK_API_URL`` points
    at a host that only exists in the fakes.
    """
    application = create_app("testing")
    application.config["TASK_API_URL"] = API_URL
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Provide a Flask test client scoped to a single test function.

    A fresh client per test keeps session cookies from leaking between
    tests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def logged_in_client(client):
    """Test client whose session already holds ``TEST_TOKEN``."""
    with client.session_transaction() as sess:
        sess[TOKEN_KEY] = TEST_TOKEN
    return client


# -----------------------------------------------------------------------------
# HTTP Fakes
# -----------------------------------------------------------------------------


@pytest.fixture
def fake_requests(monkeypatch):
    """
    Replace ``requests.request`` as seen by the API client.

    Returns the :class:`RecordingRequests` instance; queue replies on it
    with ``fake_requests.queue(...)``.
    """
    recorder = RecordingRequests()
    monkeypatch.setattr("client_app.api.requests.request", recorder)
    return recorder


# -----------------------------------------------------------------------------
# Client Object Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def storage() -> dict:
    """Plain dict standing in for browser storage."""
    return {}


@pytest.fixture
def context(storage) -> SessionContext:
    return SessionContext(TokenStore(storage))


@pytest.fixture
def authed_context(storage, context) -> SessionContext:
    storage[TOKEN_KEY] = TEST_TOKEN
    return context


@pytest.fixture
def api() -> TaskApiClient:
    return TaskApiClient(API_URL)


@pytest.fixture
def sync(authed_context, api) -> TaskListSynchronizer:
    """Synchronizer with a stored token and an empty collection."""
    return TaskListSynchronizer(authed_context, api)


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def task_payload():
    """
    Factory fixture for task JSON objects as the API returns them.

    Example:
        def test_something(task_payload):
            payload = task_payload(id=7, completed=True)
    """

    def _make(
        id: int | None = None,
        title: str | None = None,
        description: str | None = None,
        completed: bool = False,
    ) -> dict:
        return {
            "id": id if id is not None else fake.unique.random_int(min=1, max=99999),
            "title": title if title is not None else fake.sentence(nb_words=4),
            "description": description if description is not None else fake.paragraph(),
            "completed": completed,
        }

    return _make
