"""
JWT-style identity token creation and verification.

Tokens are a base64url-encoded JSON payload signed with HMAC-SHA256::

    <payload>.<hex signature>

The payload carries the ``username`` claim plus ``iat`` / ``exp``.  The
secret and validity window come from ``Settings`` (env vars ``JWT_SECRET``
and ``JWT_EXPIRY_SECONDS``).  There is no revocation list: a token stays
valid until ``exp``.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from dataclasses import dataclass
from typing import Optional

from utils.errors import Forbidden, Unauthenticated


@dataclass(frozen=True)
class Identity:
    """The acting user resolved from a verified token."""

    username: str


class TokenService:
    def __init__(self, secret: str, expiry_seconds: int = 3600):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret.encode()
        self.expiry_seconds = expiry_seconds

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, username: str) -> str:
        """Create a signed token for *username*, valid for ``expiry_seconds``."""
        now = int(time.time())
        payload = {
            "username": username,
            "iat": now,
            "exp": now + self.expiry_seconds,
        }
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify(self, token: Optional[str]) -> Identity:
        """
        Verify *token* and return the identity it asserts.

        Raises ``Unauthenticated`` when no token is given and ``Forbidden``
        when the token is malformed, tampered with or expired.
        """
        if not token:
            raise Unauthenticated()
        try:
            encoded, sig = token.split(".", 1)
            raw = urlsafe_b64decode(encoded.encode())
            if not hmac.compare_digest(sig, self._sign(raw)):
                raise ValueError("bad signature")
            payload = json.loads(raw)
            if payload.get("exp", 0) < time.time():
                raise ValueError("token expired")
            username = payload["username"]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise Forbidden(f"Invalid or expired token: {exc}") from exc
        if not isinstance(username, str) or not username:
            raise Forbidden("Invalid or expired token: no username claim")
        return Identity(username=username)
