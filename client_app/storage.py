"""
Client-local token storage.

The token lives under one well-known key in a mutable mapping. In the web
app that mapping is the Flask session (a signed cookie held by the
browser); tests hand in a plain ``dict``.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

TOKEN_KEY = "token"


class TokenStore:
    """Persist a single bearer token under :data:`TOKEN_KEY`."""

    def __init__(self, storage: MutableMapping[str, Any]):
        self._storage = storage

    def load(self) -> str | None:
        token = self._storage.get(TOKEN_KEY)
        if not isinstance(token, str) or not token:
            return None
        return token

    def save(self, token: str) -> None:
        self._storage[TOKEN_KEY] = token
        # Flask sessions expire with the browser unless marked permanent.
        if hasattr(self._storage, "permanent"):
            self._storage.permanent = True

    def clear(self) -> None:
        self._storage.pop(TOKEN_KEY, None)
