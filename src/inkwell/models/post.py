# src/inkwell/models/post.py
"""SQLAlchemy models for posts and their ordered comment references."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.db.ids import RESOURCE_ID_LENGTH, new_id
from inkwell.db.session import Base
from inkwell.db.time import utcnow

if TYPE_CHECKING:
    from .user import User


class Post(Base):
    """Primary content entity produced by authors.

    Unpublished posts (drafts) are only visible to their author.
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        primary_key=True,
        default=new_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        ForeignKey("users.id"),
        index=True,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    author: Mapped[User] = relationship("User", lazy="joined")
    comment_links: Mapped[list[PostCommentLink]] = relationship(
        "PostCommentLink",
        back_populates="post",
        order_by="PostCommentLink.id",
        cascade="all, delete-orphan",
    )

    @property
    def comment_ids(self) -> list[str]:
        """Comment ids in insertion order."""
        return [link.comment_id for link in self.comment_links]


class PostCommentLink(Base):
    """One entry of a post's ordered comment sequence.

    The autoincrement ``id`` fixes the order. ``comment_id`` is unique: a
    comment is referenced by at most one post.
    """

    __tablename__ = "post_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        ForeignKey("posts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    comment_id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        ForeignKey("comments.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    post: Mapped[Post] = relationship("Post", back_populates="comment_links")
