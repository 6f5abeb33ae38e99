"""
Error taxonomy for the task list client.

Every failure the client can hit maps onto one ``ClientError`` subclass
with a fixed, human-readable message. The API layer raises them; the
session manager and synchronizer catch them at the call site and copy the
message into their single error slot. The optional HTTP status code is
kept for logging only and is never shown to the user.
"""

from __future__ import annotations


class ClientError(Exception):
    """Base class for all user-facing client failures."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)


class SessionRequired(ClientError):
    """No token is stored; the user has to log in first."""

    default_message = "Login required."


class AuthFailure(ClientError):
    """The login exchange was rejected or returned no token."""

    default_message = "Login failed."


class FetchFailure(ClientError):
    default_message = "Failed to load tasks."


class AddFailure(ClientError):
    default_message = "Failed to add task."


class DeleteFailure(ClientError):
    default_message = "Failed to delete task."


class UpdateFailure(ClientError):
    default_message = "Failed to update task."


class ToggleFailure(ClientError):
    default_message = "Failed to update task status."
