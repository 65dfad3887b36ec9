# blog_api/core/security.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from blog_api.core.config import settings
from blog_api.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)


# -------------------------
# Password hashing
# -------------------------
class PasswordHasher:
    """bcrypt hashing through passlib; ``rounds`` is the bcrypt cost factor."""

    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = int(rounds if rounds is not None else settings.BCRYPT_ROUNDS)
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            # Unrecognized / corrupted stored hash: treat as a mismatch.
            logger.warning("Stored password hash could not be parsed")
            return False

    def dummy_verify(self) -> None:
        """Burn the same work as a real verify, for accounts that don't exist."""
        self._context.dummy_verify()


# -------------------------
# JWT helpers
# -------------------------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Signs and verifies the session JWT.

    Claims: ``sub`` (user id as string), ``iat``, ``exp``. Tokens are stateless;
    there is no revocation list, a token is valid until ``exp``.
    """

    def __init__(
        self,
        secret: str | None = None,
        *,
        algorithm: str | None = None,
        expires_in: int | None = None,
        now: Callable[[], datetime] = _now_utc,
    ) -> None:
        self.secret = secret if secret is not None else settings.JWT_SECRET
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expires_in = int(expires_in if expires_in is not None else settings.TOKEN_EXPIRE_SECONDS)
        self._now = now

    def _require_secret(self) -> None:
        if not self.secret or not self.secret.strip():
            raise RuntimeError("JWT_SECRET must be set (auth is required).")

    def issue(self, subject: str | int) -> str:
        self._require_secret()

        now = self._now()
        exp = now + timedelta(seconds=self.expires_in)
        payload = {
            "sub": str(subject),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Return the verified claim set or raise InvalidTokenError."""
        self._require_secret()
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise InvalidTokenError()
        except JWTError as exc:
            logger.warning("Rejected invalid token: %s", exc)
            raise InvalidTokenError()

        sub = str(payload.get("sub") or "").strip()
        if not sub:
            raise InvalidTokenError()
        if "exp" not in payload:
            # jose only checks exp when present; we never issue tokens without one.
            raise InvalidTokenError()
        return payload

    def verify(self, token: str) -> str:
        return str(self.decode(token)["sub"]).strip()
