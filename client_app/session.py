"""
Session management for the task list client.

``SessionContext`` is the injected holder of the bearer token: it is
created around a :class:`~client_app.storage.TokenStore`, started by a
successful login and torn down by logout. Components that need auth take a
context explicitly instead of reaching for ambient storage.

``SessionManager`` drives the login/logout lifecycle and hands control to
the next page through a :class:`Navigator`.

The token is opaque to the client. It is never decoded or validated here;
an expired token is only noticed when a later API call fails.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .api import TaskApiClient
from .errors import AuthFailure, SessionRequired
from .models import Result, Route
from .storage import TokenStore

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Something that can transfer control to another entry point."""

    def go(self, route: Route) -> None: ...


class SessionContext:
    """Explicit owner of the stored bearer token."""

    def __init__(self, store: TokenStore):
        self._store = store

    @property
    def token(self) -> str | None:
        return self._store.load()

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def begin(self, token: str) -> None:
        self._store.save(token)

    def end(self) -> None:
        self._store.clear()

    def require(self) -> str:
        """
        Return the stored token.

        Raises:
            SessionRequired: If no token is stored.
        """
        token = self.token
        if token is None:
            raise SessionRequired()
        return token


class SessionManager:
    """
    Login, logout and session-presence checks.

    Args:
        context: Session context that owns the token.
        api: Client used for the login exchange.
        navigator: Receives the route to show next.
    """

    def __init__(self, context: SessionContext, api: TaskApiClient, navigator: Navigator):
        self.context = context
        self.api = api
        self.navigator = navigator
        self.error = ""

    def login(self, username: str, password: str) -> Result[str]:
        """
        Exchange credentials for a token and store it.

        On success the token is persisted and control moves to the task
        list. On failure nothing is stored and ``error`` holds the message.
        """
        self.error = ""
        try:
            token = self.api.login(username, password)
        except AuthFailure as exc:
            self.error = exc.message
            return Result.failure(exc)

        self.context.begin(token)
        logger.info("Login succeeded for %s", username)
        self.navigator.go(Route.TASKS)
        return Result.success(token)

    def get_token(self) -> str | None:
        return self.context.token

    def logout(self) -> None:
        """Drop the stored token and return to the login page."""
        self.context.end()
        self.navigator.go(Route.LOGIN)

    def require_session(self) -> str | None:
        """
        Check for a token on entry to a protected view.

        Returns:
            The stored token, or ``None`` after recording the
            "login required" message and redirecting to the login page.
        """
        try:
            return self.context.require()
        except SessionRequired as exc:
            self.error = exc.message
            self.navigator.go(Route.LOGIN)
            return None
