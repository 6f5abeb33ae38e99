"""
HTTP transport for the remote task API.

``TaskApiClient`` wraps every endpoint the client consumes:

    POST   /auth/login          form-encoded username/password -> {access_token}
    GET    /tasks               -> [Task, ...]
    POST   /tasks               {title, description} -> Task
    DELETE /tasks/<id>          -> status only
    PUT    /tasks/<id>          {title, description} -> Task
    POST   /tasks/<id>/toggle   -> Task

All requests go through :meth:`TaskApiClient._call`, which attaches the
bearer token and the configured timeout. Any non-2xx status, network
failure or unreadable success body is raised as the operation's
``ClientError`` subclass. Network and HTTP failures produce the same
user-facing message and differ only in the log line.

Key Concepts Demonstrated:
- Centralised request helper with per-client timeout and auth header
- Translating transport failures into a typed error taxonomy
- Never logging credentials or tokens
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from .errors import (
    AddFailure,
    AuthFailure,
    ClientError,
    DeleteFailure,
    FetchFailure,
    ToggleFailure,
    UpdateFailure,
)
from .models import Task

logger = logging.getLogger(__name__)


class TaskApiClient:
    """
    Thin client for the task API.

    Args:
        base_url: Root URL of the task API (e.g. ``"http://localhost:8000"``).
        timeout: Seconds to wait for each request, or ``None`` to wait
            indefinitely.
    """

    def __init__(self, base_url: str, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _call(
        self,
        method: str,
        path: str,
        error_type: type[ClientError],
        *,
        token: str | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a request and raise ``error_type`` unless it succeeded.

        Args:
            method: HTTP method (``"GET"``, ``"POST"``, ...).
            path: Path relative to the API root.
            error_type: Failure raised for network errors and non-2xx replies.
            token: Bearer token to attach, if any.
            **kwargs: Forwarded to :func:`requests.request` (``json``, ``data``).

        Returns:
            The successful :class:`requests.Response`.
        """
        headers = dict(kwargs.pop("headers", {}))
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            response = requests.request(
                method=method,
                url=self._url(path),
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc.__class__.__name__)
            raise error_type() from exc

        if not 200 <= response.status_code < 300:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise error_type(status_code=response.status_code)
        return response

    @staticmethod
    def _json(response: requests.Response, error_type: type[ClientError]) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Unreadable JSON body (status %s)", response.status_code)
            raise error_type(status_code=response.status_code) from exc

    def _task(self, response: requests.Response, error_type: type[ClientError]) -> Task:
        try:
            return Task.from_payload(self._json(response, error_type))
        except ValueError as exc:
            raise error_type(status_code=response.status_code) from exc

    # -----------------------------------------------------------------
    # Authentication
    # -----------------------------------------------------------------

    def login(self, username: str, password: str) -> str:
        """
        Exchange credentials for a bearer token.

        Credentials are sent form-encoded, as OAuth2 password-flow
        endpoints expect.

        Returns:
            The ``access_token`` from the response body.

        Raises:
            AuthFailure: On rejection, network error, or a body without a token.
        """
        response = self._call(
            "POST",
            "/auth/login",
            AuthFailure,
            data={"username": username, "password": password},
        )
        payload = self._json(response, AuthFailure)
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token.strip():
            logger.warning("Login response did not contain an access token")
            raise AuthFailure(status_code=response.status_code)
        return token

    # -----------------------------------------------------------------
    # Tasks
    # -----------------------------------------------------------------

    def list_tasks(self, token: str) -> list[Task]:
        response = self._call("GET", "/tasks", FetchFailure, token=token)
        payload = self._json(response, FetchFailure)
        if not isinstance(payload, list):
            raise FetchFailure(status_code=response.status_code)
        try:
            return [Task.from_payload(item) for item in payload]
        except ValueError as exc:
            raise FetchFailure(status_code=response.status_code) from exc

    def create_task(self, token: str, title: str, description: str) -> Task:
        response = self._call(
            "POST",
            "/tasks",
            AddFailure,
            token=token,
            json={"title": title, "description": description},
        )
        return self._task(response, AddFailure)

    def delete_task(self, token: str, task_id: int) -> None:
        self._call("DELETE", f"/tasks/{task_id}", DeleteFailure, token=token)

    def update_task(self, token: str, task_id: int, title: str, description: str) -> Task:
        response = self._call(
            "PUT",
            f"/tasks/{task_id}",
            UpdateFailure,
            token=token,
            json={"title": title, "description": description},
        )
        return self._task(response, UpdateFailure)

    def toggle_task(self, token: str, task_id: int) -> Task:
        response = self._call("POST", f"/tasks/{task_id}/toggle", ToggleFailure, token=token)
        return self._task(response, ToggleFailure)
