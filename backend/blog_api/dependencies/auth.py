# blog_api/dependencies/auth.py
from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from blog_api.auth.identity import Identity
from blog_api.core.database import get_db
from blog_api.core.errors import UnauthenticatedError
from blog_api.models.user import User
from blog_api.services.auth import AuthService
from blog_api.services.session_cookie import read_session_cookie
from blog_api.services.users import UserStore

logger = logging.getLogger(__name__)


def authorize(context: Any) -> Identity:
    """
    Route guard: allow with an Identity or deny by raising.

    ``context`` needs ``request`` and ``auth`` (an AuthService); on success the
    resolved ``user`` and ``identity`` are attached to it for the protected
    operation. Denials:
      - no session cookie -> UnauthenticatedError
      - bad/expired token, or unknown subject -> InvalidTokenError
    """
    current = getattr(context, "identity", None)
    if current is not None and current.is_authenticated and getattr(context, "user", None) is not None:
        return current

    token = read_session_cookie(context.request)
    if not token:
        raise UnauthenticatedError()

    user = context.auth.verify(token)
    identity = Identity.from_user(user)
    context.user = user
    context.identity = identity
    logger.debug("Authorized request: %s", identity.to_debug_dict())
    return identity


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Same guard as ``authorize``, exposed as a FastAPI dependency for REST routes.
    The identity is also stored on ``request.state``.
    """
    ctx = SimpleNamespace(request=request, auth=AuthService(UserStore(db)), user=None, identity=None)
    request.state.identity = authorize(ctx)
    return ctx.user
