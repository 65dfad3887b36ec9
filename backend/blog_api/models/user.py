# blog_api/models/user.py
from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from blog_api.core.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String(255), unique=True, index=True, nullable=False)
    # Never serialize; no GraphQL or REST output type exposes this column.
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # user → posts
    posts = relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="desc(Post.id)",
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
