import os

# Ensure config exists before importing blog_api.main (it calls require_jwt_secret() at import time).
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
# Minimum bcrypt cost keeps the suite fast; production default is 10.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.core.base import Base
from blog_api.core import config as app_config
from blog_api.core.security import PasswordHasher, TokenIssuer

# Import models so they register with SQLAlchemy metadata.
from blog_api.models.user import User  # noqa: F401
from blog_api.models.post import Post  # noqa: F401

from blog_api.core.database import get_db
from blog_api.services.auth import AuthService
from blog_api.services.users import UserStore

TEST_PASSWORD = "secret123"


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB persists across tests with StaticPool; reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def _reset_mutable_settings():
    """
    Tests sometimes tweak global settings (app_config.settings.*). Because that object is
    process-global, restore values after each test to avoid cross-test coupling.
    """
    keys = [
        "JWT_SECRET",
        "TOKEN_EXPIRE_SECONDS",
        "PASSWORD_MIN_LENGTH",
        "BCRYPT_ROUNDS",
        "POST_TITLE_MIN_LENGTH",
        "POST_TITLE_MAX_LENGTH",
        "AUTH_COOKIE_NAME",
    ]
    original = {k: getattr(app_config.settings, k) for k in keys}
    try:
        yield
    finally:
        for k, v in original.items():
            setattr(app_config.settings, k, v)


@pytest.fixture()
def hasher():
    return PasswordHasher()


@pytest.fixture()
def tokens():
    return TokenIssuer()


@pytest.fixture()
def store(db_session):
    return UserStore(db_session)


@pytest.fixture()
def auth_service(store, hasher, tokens):
    return AuthService(store, hasher=hasher, tokens=tokens)


@pytest.fixture()
def users(db_session, hasher):
    """Two existing users sharing TEST_PASSWORD."""
    user_a = User(email="alice@example.com", password_hash=hasher.hash(TEST_PASSWORD))
    user_b = User(email="bob@example.com", password_hash=hasher.hash(TEST_PASSWORD))
    db_session.add_all([user_a, user_b])
    db_session.commit()
    db_session.refresh(user_a)
    db_session.refresh(user_b)
    return user_a, user_b


@pytest.fixture()
def app(db_session):
    import blog_api.main as main

    fastapi_app = main.app

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    """Anonymous client; signup/login through it stores the session cookie."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_client(app, users, tokens):
    """Client already carrying a valid session cookie for user_a."""
    user_a, _ = users
    with TestClient(app) as c:
        c.cookies.set("token", tokens.issue(user_a.id))
        yield c


@pytest.fixture()
def gql():
    """POST a GraphQL operation and return the decoded body."""

    def _gql(c, query: str, variables: dict | None = None):
        res = c.post("/graphql", json={"query": query, "variables": variables or {}})
        assert res.status_code == 200, res.text
        return SimpleNamespace(response=res, body=res.json())

    return _gql
