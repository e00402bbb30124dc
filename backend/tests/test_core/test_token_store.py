"""
Unit tests for TokenStore

Author: Customer Connect Team
Date: 2025-11-07
"""
import json
import time

from jose import jwt

from app.core.token_store import TokenStore


def make_token(**claims):
    return jwt.encode(claims, "test-secret", algorithm="HS256")


class TestTokenStore:
    """Test the single global session"""

    def test_starts_empty(self):
        store = TokenStore()

        assert store.token is None
        assert store.user is None

    def test_set_persists_to_file(self, tmp_path):
        """Test a configured path mirrors the session as JSON"""
        # Arrange
        path = tmp_path / "session.json"
        store = TokenStore(str(path))

        # Act
        store.set("abc", {"username": "admin"})

        # Assert
        assert json.loads(path.read_text()) == {"token": "abc", "user": {"username": "admin"}}

    def test_load_restores_session(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"token": "abc", "user": {"role": "customer"}}))

        store = TokenStore(str(path))

        assert store.token == "abc"
        assert store.user == {"role": "customer"}

    def test_unreadable_file_is_ignored(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        store = TokenStore(str(path))

        assert store.token is None

    def test_setting_none_clears_memory_and_file(self, tmp_path):
        # Arrange
        path = tmp_path / "session.json"
        store = TokenStore(str(path))
        store.set("abc", {"username": "admin"})

        # Act
        store.set(None)

        # Assert
        assert store.token is None
        assert store.user is None
        assert not path.exists()

    def test_set_without_user_keeps_user(self):
        store = TokenStore()
        store.set("first", {"username": "admin"})

        store.set("second")

        assert store.token == "second"
        assert store.user == {"username": "admin"}


class TestTokenExpiry:
    """Test the unverified exp check"""

    def test_past_exp_is_expired(self):
        store = TokenStore()
        store.set(make_token(exp=int(time.time()) - 60))

        assert store.is_expired() is True

    def test_future_exp_is_not_expired(self):
        store = TokenStore()
        store.set(make_token(exp=int(time.time()) + 3600))

        assert store.is_expired() is False

    def test_explicit_clock(self):
        store = TokenStore()
        store.set(make_token(exp=1000))

        assert store.is_expired(now=999) is False
        assert store.is_expired(now=1000) is True

    def test_token_without_exp_never_expires(self):
        store = TokenStore()
        store.set(make_token(sub="admin"))

        assert store.is_expired() is False

    def test_opaque_token_is_not_expired(self):
        """Test non-JWT tokens are left for the backend to judge"""
        store = TokenStore()
        store.set("opaque-session-token")

        assert store.is_expired() is False
