# blog_api/services/auth.py
"""
Authentication flow: signup, login and token verification.

The service is wired explicitly with its collaborators (credential store,
password hasher, token issuer); it holds no per-request state of its own.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from blog_api.core.errors import DuplicateEmailError, InvalidCredentialsError, InvalidTokenError
from blog_api.core.security import PasswordHasher, TokenIssuer
from blog_api.models.user import User
from blog_api.schemas.auth import LoginIn, SignUpIn
from blog_api.schemas.validation import parse_input
from blog_api.services.users import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: str


class AuthService:
    def __init__(
        self,
        store: UserStore,
        *,
        hasher: PasswordHasher | None = None,
        tokens: TokenIssuer | None = None,
    ) -> None:
        self.store = store
        self.hasher = hasher or PasswordHasher()
        self.tokens = tokens or TokenIssuer()

    def signup(self, email: str, password: str) -> AuthResult:
        data = parse_input(SignUpIn, {"email": email, "password": password})

        if self.store.exists(data.email):
            raise DuplicateEmailError()

        user = self.store.create(email=data.email, password_hash=self.hasher.hash(data.password))
        try:
            token = self.tokens.issue(user.id)
        except Exception:
            # Nothing is persisted unless the caller also gets a token.
            self.store.rollback()
            raise
        self.store.commit(user)
        logger.info("Signup succeeded for user id=%s", user.id)
        return AuthResult(user=user, token=token)

    def login(self, email: str, password: str) -> AuthResult:
        data = parse_input(LoginIn, {"email": email, "password": password})

        user = self.store.find_by_email(data.email)
        if user is None:
            self.hasher.dummy_verify()
            logger.info("Login rejected")
            raise InvalidCredentialsError()

        if not self.hasher.verify(data.password, user.password_hash):
            logger.info("Login rejected")
            raise InvalidCredentialsError()

        token = self.tokens.issue(user.id)
        logger.info("Login succeeded for user id=%s", user.id)
        return AuthResult(user=user, token=token)

    def verify(self, token: str) -> User:
        subject = self.tokens.verify(token)
        user = self.store.find_by_id(subject)
        if user is None:
            logger.warning("Token subject %s does not resolve to a user", subject)
            raise InvalidTokenError()
        return user
