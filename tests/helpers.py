"""Test doubles shared by the unit and integration suites."""

from __future__ import annotations

from typing import Any

API_URL = "http://task-api"
TEST_TOKEN = "test-token-123"
NO_BODY = object()


class FakeResponse:
    """
    Minimal stand-in for :class:`requests.Response`.

    Provides just ``status_code`` and ``json()``, which is all the API
    client reads. Pass ``NO_BODY`` to make ``json()`` fail like a response
    without a JSON body.
    """

    def __init__(self, status_code: int, payload: Any = NO_BODY):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is NO_BODY:
            raise ValueError("Response has no JSON body")
        return self._payload


class RecordingRequests:
    """
    Replacement for :func:`requests.request` that replays queued replies.

    Every call's keyword arguments are recorded in ``calls``. A queued
    exception is raised instead of returned. Running out of replies fails
    the test, which catches requests that should never have been sent.
    """

    def __init__(self, *replies: Any):
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            raise AssertionError(f"Unexpected request: {kwargs['method']} {kwargs['url']}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def queue(self, *replies: Any) -> None:
        self.replies.extend(replies)

    @property
    def requests_made(self) -> list[tuple[str, str]]:
        """``(method, url)`` for every recorded call."""
        return [(call["method"], call["url"]) for call in self.calls]
