from __future__ import annotations

from fastapi import Request, Response

from blog_api.core.config import settings


# -----------------------------
# Cookie helpers
# -----------------------------
def cookie_name() -> str:
    return str(getattr(settings, "AUTH_COOKIE_NAME", "token")).strip() or "token"


def cookie_secure() -> bool:
    # Dev http://localhost => must be False; prod config refuses False.
    return bool(getattr(settings, "AUTH_COOKIE_SECURE", False))


def cookie_samesite() -> str:
    """
    "lax" for same-site deployments
    "none" ONLY for cross-site frontends (requires HTTPS + Secure=True)
    """
    v = str(getattr(settings, "AUTH_COOKIE_SAMESITE", "lax")).lower().strip()
    if v not in {"lax", "strict", "none"}:
        return "lax"
    return v


def cookie_max_age_seconds() -> int:
    return int(getattr(settings, "TOKEN_EXPIRE_SECONDS", 3600))


def set_session_cookie(resp: Response, token: str) -> None:
    resp.set_cookie(
        key=cookie_name(),
        value=token,
        httponly=True,
        secure=cookie_secure(),
        samesite=cookie_samesite(),
        max_age=cookie_max_age_seconds(),
        path="/",
        domain=settings.AUTH_COOKIE_DOMAIN,
    )


def clear_session_cookie(resp: Response) -> None:
    resp.delete_cookie(
        key=cookie_name(),
        path="/",
        domain=settings.AUTH_COOKIE_DOMAIN,
    )


def read_session_cookie(req: Request) -> str | None:
    val = req.cookies.get(cookie_name())
    if not val:
        return None
    val = val.strip()
    return val or None
