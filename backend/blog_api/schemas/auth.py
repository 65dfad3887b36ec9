# blog_api/schemas/auth.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from blog_api.core.config import settings


class SignUpIn(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def _min_length(cls, v: str) -> str:
        min_length = max(int(settings.PASSWORD_MIN_LENGTH or 0), 1)
        if len(v) < min_length:
            raise ValueError(f"Password must be at least {min_length} characters")
        return v


class LoginIn(BaseModel):
    email: str = Field(max_length=255)
    password: str

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class MeOut(BaseModel):
    id: int
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
