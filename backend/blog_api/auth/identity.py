# blog_api/auth/identity.py
"""
Canonical authenticated identity model.

Downstream code reasons about "who is this request?" through an Identity
instead of inspecting the raw JWT. The Identity object is INTERNAL ONLY and is
never returned to clients.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Identity:
    """
    Authenticated (or unauthenticated) caller of one request.

    Attributes:
        user_id: Internal user id, or ``None`` if unauthenticated.
        email: User's email address if known.
        is_authenticated: True once the session cookie has been verified.
    """

    user_id: int | None = None
    email: str | None = None
    is_authenticated: bool = False

    @classmethod
    def unauthenticated(cls) -> Identity:
        return cls()

    @classmethod
    def from_user(cls, user: Any) -> Identity:
        email = getattr(user, "email", None)
        return cls(
            user_id=int(user.id),
            email=email.strip().lower() if email else None,
            is_authenticated=True,
        )

    def to_debug_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "is_authenticated": self.is_authenticated,
        }
