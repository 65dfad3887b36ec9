from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from blog_api.models.post import Post
from blog_api.models.user import User

logger = logging.getLogger(__name__)


def get_post(db: Session, post_id: int | str) -> Optional[Post]:
    try:
        pk = int(post_id)
    except (TypeError, ValueError):
        return None
    return db.get(Post, pk)


def list_posts(db: Session) -> list[Post]:
    return db.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).all()


def list_posts_by_author(db: Session, author_id: int) -> list[Post]:
    return (
        db.query(Post)
        .filter(Post.author_id == author_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


def create_post(db: Session, *, author: User, title: str, body: str | None = None) -> Post:
    post = Post(author_id=author.id, title=title, body=body)
    db.add(post)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(post)
    logger.info("Post id=%s created by user id=%s", post.id, author.id)
    return post
