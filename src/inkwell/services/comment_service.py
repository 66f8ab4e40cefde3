"""Service-level operations on individual comments."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from inkwell.core.errors import NotFoundError
from inkwell.models import Comment
from inkwell.repositories import CommentRepository, PostRepository
from inkwell.schemas.comment import CommentUpdate
from inkwell.services.access_policy import (
    AuthContext,
    Operation,
    can_modify_comment,
    can_view_comment,
)

logger = logging.getLogger(__name__)

COMMENT_NOT_FOUND = "Comment not found"


def _load_comment(repo: CommentRepository, comment_id: str) -> Comment:
    comment = repo.get_by_id(comment_id)
    if comment is None:
        raise NotFoundError(COMMENT_NOT_FOUND)
    return comment


def get_comment(db: Session, ctx: AuthContext, comment_id: str) -> Comment:
    """Return a comment if the post it hangs under is visible to the caller."""
    comment = _load_comment(CommentRepository(db), comment_id)
    parent = PostRepository(db).find_by_comment(comment.id)
    can_view_comment(ctx, comment, parent).enforce(COMMENT_NOT_FOUND)
    return comment


def update_comment(
    db: Session,
    ctx: AuthContext,
    comment_id: str,
    payload: CommentUpdate,
) -> Comment:
    comment = _load_comment(CommentRepository(db), comment_id)
    can_modify_comment(ctx, comment, Operation.UPDATE).enforce(COMMENT_NOT_FOUND)

    comment.content = payload.content
    db.commit()
    db.refresh(comment)
    if ctx.identity_id != comment.author_id:
        logger.info("Admin %s edited comment %s by %s", ctx.identity_id, comment.id, comment.author_id)
    return comment


def delete_comment(db: Session, ctx: AuthContext, comment_id: str) -> None:
    """Unlink a comment from its post (if any) and delete it."""
    comments = CommentRepository(db)
    comment = _load_comment(comments, comment_id)
    can_modify_comment(ctx, comment, Operation.DELETE).enforce(COMMENT_NOT_FOUND)

    posts = PostRepository(db)
    parent = posts.find_by_comment(comment.id)
    if parent is not None:
        posts.remove_comment(parent, comment.id)
    else:
        logger.info("Deleting orphaned comment %s", comment.id)
    comments.delete(comment)
    db.commit()
    logger.info("User %s deleted comment %s", ctx.identity_id, comment_id)
