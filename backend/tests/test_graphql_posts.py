from __future__ import annotations

from blog_api.models.post import Post
from blog_api.services.posts import create_post

CREATE_POST = """
mutation Create($title: String!, $body: String) {
  createPost(postInput: {title: $title, body: $body}) {
    id
    title
    body
    author { id email }
  }
}
"""


def _error(body):
    assert body.get("errors"), body
    return body["errors"][0]


def test_create_post_denied_without_identity(client, gql, db_session, users):
    r = gql(client, CREATE_POST, {"title": "A perfectly fine title", "body": "x"})

    err = _error(r.body)
    assert err["extensions"]["code"] == "UNAUTHENTICATED"
    assert err["path"] == ["createPost"]
    assert r.body["data"] is None
    assert db_session.query(Post).count() == 0


def test_create_post_denied_with_expired_token(client, gql, db_session, users):
    from datetime import datetime, timedelta, timezone

    from blog_api.core.security import TokenIssuer

    user_a, _ = users
    long_ago = datetime.now(timezone.utc) - timedelta(days=1)
    client.cookies.set("token", TokenIssuer(now=lambda: long_ago).issue(user_a.id))

    r = gql(client, CREATE_POST, {"title": "A perfectly fine title"})
    assert _error(r.body)["extensions"]["code"] == "INVALID_TOKEN"
    assert db_session.query(Post).count() == 0


def test_create_post_stamps_authenticated_author(auth_client, gql, db_session, users):
    user_a, _ = users
    r = gql(auth_client, CREATE_POST, {"title": "Hello GraphQL world", "body": "First post"})

    post = r.body["data"]["createPost"]
    assert post["title"] == "Hello GraphQL world"
    assert post["body"] == "First post"
    assert post["author"] == {"id": str(user_a.id), "email": "alice@example.com"}

    row = db_session.query(Post).one()
    assert row.author_id == user_a.id


def test_signup_then_create_post_in_same_session(client, gql):
    signup = """
    mutation { signup(signUpInput: {email: "new@example.com", password: "secret1"}) { id } }
    """
    user_id = gql(client, signup).body["data"]["signup"]["id"]

    post = gql(client, CREATE_POST, {"title": "Written right after signup"}).body["data"]["createPost"]
    assert post["author"]["id"] == user_id
    assert post["body"] is None


def test_create_post_title_length_is_validated(auth_client, gql, db_session):
    short = _error(gql(auth_client, CREATE_POST, {"title": "too short"}).body)
    long = _error(gql(auth_client, CREATE_POST, {"title": "x" * 61}).body)

    assert short["extensions"]["code"] == "VALIDATION_ERROR"
    assert short["extensions"]["details"]["errors"][0]["field"] == "title"
    assert long["extensions"]["code"] == "VALIDATION_ERROR"
    assert db_session.query(Post).count() == 0


def test_posts_query_lists_newest_first(client, gql, db_session, users):
    user_a, user_b = users
    first = create_post(db_session, author=user_a, title="The first post title")
    second = create_post(db_session, author=user_b, title="The second post title")

    r = gql(client, "{ posts { id title author { email } } }")
    posts = r.body["data"]["posts"]

    assert [p["id"] for p in posts] == [str(second.id), str(first.id)]
    assert posts[0]["author"]["email"] == "bob@example.com"


def test_post_query_by_id(client, gql, db_session, users):
    user_a, _ = users
    post = create_post(db_session, author=user_a, title="Lookup by identifier", body="body")

    found = gql(client, "query($id: ID!) { post(id: $id) { title body } }", {"id": str(post.id)})
    assert found.body["data"]["post"] == {"title": "Lookup by identifier", "body": "body"}

    missing = gql(client, "query($id: ID!) { post(id: $id) { title } }", {"id": "999999"})
    assert missing.body["data"]["post"] is None

    junk = gql(client, "query($id: ID!) { post(id: $id) { title } }", {"id": "not-a-number"})
    assert junk.body["data"]["post"] is None


def test_user_query_resolves_posts(client, gql, db_session, users):
    user_a, user_b = users
    create_post(db_session, author=user_a, title="Alice writes a post")
    create_post(db_session, author=user_b, title="Bob writes a post too")

    r = gql(client, "query($id: ID!) { user(id: $id) { email post { title } } }", {"id": str(user_a.id)})
    user = r.body["data"]["user"]

    assert user["email"] == "alice@example.com"
    assert [p["title"] for p in user["post"]] == ["Alice writes a post"]


def test_user_query_unknown_id_is_null(client, gql):
    r = gql(client, '{ user(id: "424242") { email } }')
    assert r.body["data"]["user"] is None
