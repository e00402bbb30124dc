"""
Session token storage

The console keeps a single global auth token (plus the user returned at
login). It lives in memory and, when a path is configured, is mirrored to a
JSON file so a restarted console keeps its session.
"""
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from jose import jwt, JWTError

logger = logging.getLogger(__name__)


class TokenStore:
    """Holds the bearer token used for every upstream request"""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path) if path else None
        self._token: Optional[str] = None
        self._user: Optional[Dict[str, Any]] = None
        self.load()

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self._user

    def load(self) -> None:
        """Read the persisted session, if any"""
        if not self.path or not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token store {self.path}: {e}")
            return

        self._token = data.get("token")
        self._user = data.get("user")

    def set(self, token: Optional[str], user: Optional[Dict[str, Any]] = None) -> None:
        """Store a token; passing None clears the session"""
        if not token:
            self.clear()
            return

        self._token = token
        if user is not None:
            self._user = user

        if self.path:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"token": self._token, "user": self._user}))

    def clear(self) -> None:
        self._token = None
        self._user = None
        if self.path and self.path.exists():
            self.path.unlink()

    def is_expired(self, now: Optional[float] = None) -> bool:
        """
        Check the token's exp claim without verifying the signature.

        The backend owns verification; this only avoids sending a token we
        already know is stale. Tokens that cannot be decoded are not
        considered expired.
        """
        if not self._token:
            return False

        try:
            claims = jwt.get_unverified_claims(self._token)
        except JWTError:
            return False

        exp = claims.get("exp")
        if exp is None:
            return False

        current = now if now is not None else time.time()
        return float(exp) <= current
