# blog_api/services/users.py
"""
Credential store backed by SQLAlchemy.

Responsibilities:
- User lookup by id or email
- Email existence checks for signup
- Staging new users; the signup flow commits or rolls back
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.core.errors import DuplicateEmailError
from blog_api.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class UserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        """Look up a user by email address."""
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: int | str) -> Optional[User]:
        """Look up a user by primary key; non-numeric ids never match."""
        try:
            pk = int(user_id)
        except (TypeError, ValueError):
            return None
        return self.db.get(User, pk)

    def exists(self, email: str) -> bool:
        stmt = select(exists().where(User.email == normalize_email(email)))
        return bool(self.db.execute(stmt).scalar())

    def create(self, *, email: str, password_hash: str) -> User:
        """
        Stage a user row and flush it so the id is assigned. The caller owns the
        transaction and must ``commit()`` or ``rollback()``.

        A unique-index violation (a concurrent signup that won the race after our
        existence check) rolls back and surfaces as DuplicateEmailError.
        """
        user = User(email=normalize_email(email), password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmailError()
        except Exception:
            self.db.rollback()
            raise
        return user

    def commit(self, user: User) -> User:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmailError()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        logger.info("Created user id=%s", user.id)
        return user

    def rollback(self) -> None:
        self.db.rollback()
