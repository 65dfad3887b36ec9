"""
GraphQL request context.

Built once per HTTP request. Carries the request's DB session, the wired
AuthService, and (after the guard ran) the authenticated user and identity.
The ``request``/``response`` attributes are filled in by Strawberry's router.
"""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from blog_api.auth.identity import Identity
from blog_api.core.database import get_db
from blog_api.models.user import User
from blog_api.services.auth import AuthService
from blog_api.services.users import UserStore


class GraphQLContext(BaseContext):
    def __init__(self, db: Session, auth: AuthService) -> None:
        super().__init__()
        self.db = db
        self.auth = auth
        self.user: User | None = None
        self.identity: Identity = Identity.unauthenticated()


async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    return GraphQLContext(db=db, auth=AuthService(UserStore(db)))
