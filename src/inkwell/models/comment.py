# src/inkwell/models/comment.py
"""SQLAlchemy model for comments."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.db.ids import RESOURCE_ID_LENGTH, new_id
from inkwell.db.session import Base
from inkwell.db.time import utcnow

if TYPE_CHECKING:
    from .user import User


class Comment(Base):
    """A comment owned by its author.

    Comments do not point at a post. A post references its comments through
    ``PostCommentLink`` rows, so a comment may outlive its link (orphaned).
    """

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        primary_key=True,
        default=new_id,
    )
    author_id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        ForeignKey("users.id"),
        index=True,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    author: Mapped[User] = relationship("User", lazy="joined")
