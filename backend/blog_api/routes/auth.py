# blog_api/routes/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from blog_api.dependencies.auth import get_current_user
from blog_api.models.user import User
from blog_api.schemas.auth import MeOut

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=MeOut)
def me(user: User = Depends(get_current_user)):
    return user
