# src/inkwell/models/__init__.py
"""SQLAlchemy models for the Inkwell application."""

from .comment import Comment
from .post import Post, PostCommentLink
from .user import User

__all__ = [
    "Comment",
    "Post", "PostCommentLink",
    "User",
]
