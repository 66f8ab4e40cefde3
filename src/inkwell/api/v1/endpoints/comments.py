# src/inkwell/api/v1/endpoints/comments.py
"""Comment endpoints for the Inkwell API."""

from fastapi import APIRouter, status

from inkwell.api.v1.dependencies import (
    AuthContextDep,
    CommentIdDep,
    RequiredAuthDep,
    SessionDep,
)
from inkwell.models import Comment
from inkwell.schemas.comment import CommentResponse, CommentUpdate
from inkwell.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/{comment_id}", response_model=CommentResponse)
def get_comment(comment_id: CommentIdDep, ctx: AuthContextDep, db: SessionDep) -> Comment:
    return comment_service.get_comment(db, ctx, comment_id)


@router.put("/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: CommentIdDep,
    ctx: RequiredAuthDep,
    payload: CommentUpdate,
    db: SessionDep,
) -> Comment:
    """Edit a comment. Allowed for its author and for administrators."""
    return comment_service.update_comment(db, ctx, comment_id, payload)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(comment_id: CommentIdDep, ctx: RequiredAuthDep, db: SessionDep) -> None:
    """Delete a comment and unlink it from its post.

    Allowed for its author and for administrators.
    """
    comment_service.delete_comment(db, ctx, comment_id)
