from __future__ import annotations

from types import SimpleNamespace

import pytest

from blog_api.auth.identity import Identity
from blog_api.core.errors import InvalidTokenError, UnauthenticatedError
from blog_api.dependencies.auth import authorize


def _context(auth_service, cookies: dict | None = None):
    return SimpleNamespace(
        request=SimpleNamespace(cookies=cookies or {}),
        auth=auth_service,
        user=None,
        identity=Identity.unauthenticated(),
    )


def test_guard_denies_without_cookie(auth_service):
    ctx = _context(auth_service)

    with pytest.raises(UnauthenticatedError):
        authorize(ctx)

    assert ctx.user is None
    assert ctx.identity.is_authenticated is False


def test_guard_denies_blank_cookie(auth_service):
    with pytest.raises(UnauthenticatedError):
        authorize(_context(auth_service, {"token": "   "}))


def test_guard_denies_invalid_token(auth_service):
    ctx = _context(auth_service, {"token": "not-a-jwt"})

    with pytest.raises(InvalidTokenError):
        authorize(ctx)
    assert ctx.user is None


def test_guard_allows_valid_token_and_attaches_identity(auth_service, users, tokens):
    user_a, _ = users
    ctx = _context(auth_service, {"token": tokens.issue(user_a.id)})

    identity = authorize(ctx)

    assert identity.is_authenticated is True
    assert identity.user_id == user_a.id
    assert identity.email == "alice@example.com"
    assert ctx.user.id == user_a.id
    assert ctx.identity is identity


def test_guard_reads_configured_cookie_name(auth_service, users, tokens, monkeypatch):
    from blog_api.core import config as app_config

    user_a, _ = users
    monkeypatch.setattr(app_config.settings, "AUTH_COOKIE_NAME", "session")

    with pytest.raises(UnauthenticatedError):
        authorize(_context(auth_service, {"token": tokens.issue(user_a.id)}))

    assert authorize(_context(auth_service, {"session": tokens.issue(user_a.id)})).user_id == user_a.id


# ---------------------------------------------------------------------------
# REST dependency
# ---------------------------------------------------------------------------


def test_rest_me_requires_cookie(client):
    res = client.get("/auth/me")
    assert res.status_code == 401
    assert res.json() == {"error": "UNAUTHENTICATED", "message": "Authentication required"}


def test_rest_me_rejects_bad_token(client):
    client.cookies.set("token", "garbage")
    res = client.get("/auth/me")
    assert res.status_code == 401
    assert res.json()["error"] == "INVALID_TOKEN"


def test_rest_me_returns_current_user_without_hash(auth_client, users):
    user_a, _ = users
    res = auth_client.get("/auth/me")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == user_a.id
    assert body["email"] == "alice@example.com"
    assert "password_hash" not in body
    assert "password" not in body
