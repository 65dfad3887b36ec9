from __future__ import annotations

from pydantic import BaseModel, field_validator

from blog_api.core.config import settings


class PostIn(BaseModel):
    title: str
    body: str | None = None

    @field_validator("title")
    @classmethod
    def _title_length(cls, v: str) -> str:
        v = v.strip()
        lo, hi = settings.POST_TITLE_MIN_LENGTH, settings.POST_TITLE_MAX_LENGTH
        if len(v) < lo:
            raise ValueError(f"Title must be at least {lo} characters")
        if len(v) > hi:
            raise ValueError(f"Title must be at most {hi} characters")
        return v
