from datetime import datetime
from typing import Optional

import strawberry
from strawberry.types import Info

from blog_api.models.post import Post as PostModel
from blog_api.models.user import User as UserModel
from blog_api.services import posts as post_service
from blog_api.services.users import UserStore


@strawberry.type
class User:
    id: strawberry.ID
    email: str
    created_at: datetime
    updated_at: datetime

    @strawberry.field(description="Posts written by this user, newest first")
    def post(self, info: Info) -> list["Post"]:
        rows = post_service.list_posts_by_author(info.context.db, int(self.id))
        return [Post.from_model(p) for p in rows]

    @classmethod
    def from_model(cls, user: UserModel) -> "User":
        # password_hash deliberately has no field here.
        return cls(
            id=strawberry.ID(str(user.id)),
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@strawberry.type
class Post:
    id: strawberry.ID
    title: str
    body: Optional[str]
    created_at: datetime
    updated_at: datetime
    author_id: strawberry.Private[int]

    @strawberry.field
    def author(self, info: Info) -> User:
        user = UserStore(info.context.db).find_by_id(self.author_id)
        return User.from_model(user)

    @classmethod
    def from_model(cls, post: PostModel) -> "Post":
        return cls(
            id=strawberry.ID(str(post.id)),
            title=post.title,
            body=post.body,
            created_at=post.created_at,
            updated_at=post.updated_at,
            author_id=post.author_id,
        )


@strawberry.type
class AuthPayload:
    id: strawberry.ID
    email: str

    @classmethod
    def from_model(cls, user: UserModel) -> "AuthPayload":
        return cls(id=strawberry.ID(str(user.id)), email=user.email)


@strawberry.input
class SignUpInput:
    email: str
    password: str


@strawberry.input
class LoginInput:
    email: str
    password: str


@strawberry.input
class PostInput:
    title: str
    body: Optional[str] = None
