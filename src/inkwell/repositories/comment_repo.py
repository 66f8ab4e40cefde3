"""Data access helpers for comments."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from inkwell.models.comment import Comment

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comment entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, comment_id: str) -> Comment | None:
        return self.session.get(Comment, comment_id)

    def get_many(self, comment_ids: Sequence[str]) -> list[Comment]:
        """Return the comments for ``comment_ids`` in the order given.

        Ids without a stored comment are skipped.
        """
        if not comment_ids:
            return []
        result = self.session.execute(select(Comment).where(Comment.id.in_(comment_ids)))
        by_id = {comment.id: comment for comment in result.scalars()}
        return [by_id[cid] for cid in comment_ids if cid in by_id]

    def add(self, comment: Comment) -> Comment:
        self.session.add(comment)
        self.session.flush()
        return comment

    def delete(self, comment: Comment) -> None:
        self.session.delete(comment)
        self.session.flush()

    def delete_many(self, comment_ids: Sequence[str]) -> int:
        """Delete every comment in ``comment_ids`` and return how many rows went."""
        if not comment_ids:
            return 0
        result = self.session.execute(
            delete(Comment)
            .where(Comment.id.in_(comment_ids))
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0
