# blog_api/core/errors.py
"""
Application error taxonomy.

Every error carries a stable machine-readable ``code`` and the HTTP status a
REST route would answer with. ``extensions`` is picked up by graphql-core when
an error escapes a resolver, so GraphQL clients receive the same code.
"""
from __future__ import annotations

from typing import Any


class AppError(Exception):
    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Request failed"

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def extensions(self) -> dict[str, Any]:
        ext: dict[str, Any] = {"code": self.code}
        if self.details:
            ext["details"] = self.details
        return ext


class ValidationError(AppError):
    code = "VALIDATION_ERROR"
    status_code = 400
    default_message = "Invalid input"


class DuplicateEmailError(AppError):
    code = "CONFLICT"
    status_code = 409
    default_message = "Email is already in use"


class InvalidCredentialsError(AppError):
    # Shared by "unknown email" and "wrong password" on purpose; never specialize the message.
    code = "INVALID_CREDENTIALS"
    status_code = 401
    default_message = "Email or password incorrect"


class InvalidTokenError(AppError):
    code = "INVALID_TOKEN"
    status_code = 401
    default_message = "Invalid or expired token"


class UnauthenticatedError(AppError):
    code = "UNAUTHENTICATED"
    status_code = 401
    default_message = "Authentication required"
