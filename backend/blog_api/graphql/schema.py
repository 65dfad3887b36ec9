"""
GraphQL schema: queries over posts/users and the auth + post mutations.

Signup and login set the HTTP-only session cookie on the response; createPost
and me are guarded by IsAuthenticated and read the identity the guard attached
to the context.
"""

from typing import Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from blog_api.core.config import settings
from blog_api.graphql.context import get_context
from blog_api.graphql.permissions import IsAuthenticated
from blog_api.graphql.types import AuthPayload, LoginInput, Post, PostInput, SignUpInput, User
from blog_api.schemas.post import PostIn
from blog_api.schemas.validation import parse_input
from blog_api.services import posts as post_service
from blog_api.services.session_cookie import clear_session_cookie, set_session_cookie
from blog_api.services.users import UserStore


@strawberry.type
class Query:
    @strawberry.field
    def post(self, info: Info, id: strawberry.ID) -> Optional[Post]:
        row = post_service.get_post(info.context.db, id)
        return Post.from_model(row) if row else None

    @strawberry.field
    def posts(self, info: Info) -> list[Post]:
        return [Post.from_model(p) for p in post_service.list_posts(info.context.db)]

    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> Optional[User]:
        row = UserStore(info.context.db).find_by_id(id)
        return User.from_model(row) if row else None

    @strawberry.field(permission_classes=[IsAuthenticated])
    def me(self, info: Info) -> User:
        return User.from_model(info.context.user)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def signup(self, info: Info, sign_up_input: SignUpInput) -> AuthPayload:
        result = info.context.auth.signup(sign_up_input.email, sign_up_input.password)
        set_session_cookie(info.context.response, result.token)
        return AuthPayload.from_model(result.user)

    @strawberry.mutation
    def login(self, info: Info, login_input: LoginInput) -> AuthPayload:
        result = info.context.auth.login(login_input.email, login_input.password)
        set_session_cookie(info.context.response, result.token)
        return AuthPayload.from_model(result.user)

    @strawberry.mutation(description="Clear the session cookie. Tokens are stateless and stay valid until they expire.")
    def logout(self, info: Info) -> bool:
        clear_session_cookie(info.context.response)
        return True

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def create_post(self, info: Info, post_input: PostInput) -> Post:
        data = parse_input(PostIn, {"title": post_input.title, "body": post_input.body})
        row = post_service.create_post(
            info.context.db,
            author=info.context.user,
            title=data.title,
            body=data.body,
        )
        return Post.from_model(row)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHIQL_ENABLED else None,
    )
