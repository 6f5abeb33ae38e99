"""
Unit tests for client-local token storage.
"""

from __future__ import annotations

import pytest

from client_app.storage import TOKEN_KEY, TokenStore

pytestmark = pytest.mark.unit


class _PermanentAwareDict(dict):
    """Dict with the ``permanent`` flag Flask sessions expose."""

    permanent = False


def test_save_then_load_returns_token():
    """Test that a saved token is loaded back from the well-known key."""
    storage: dict = {}
    store = TokenStore(storage)

    store.save("abc")

    assert store.load() == "abc"
    assert storage == {TOKEN_KEY: "abc"}


@pytest.mark.parametrize("stored", [None, "", 42])
def test_load_treats_blank_or_non_string_as_absent(stored):
    """Test that blank or non-string stored values count as no token."""
    store = TokenStore({TOKEN_KEY: stored})

    assert store.load() is None


def test_clear_removes_token_and_is_idempotent():
    """Test that clear removes only the token and can be repeated."""
    storage = {TOKEN_KEY: "abc", "other": 1}
    store = TokenStore(storage)

    store.clear()
    store.clear()

    assert storage == {"other": 1}
    assert store.load() is None


def test_save_marks_flask_style_session_permanent():
    """Test that saving marks a Flask-style session permanent."""
    storage = _PermanentAwareDict()

    TokenStore(storage).save("abc")

    assert storage.permanent is True
