# src/inkwell/api/v1/endpoints/users.py
"""Public profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from inkwell.api.v1.dependencies import AuthContextDep, SessionDep, UserIdDep
from inkwell.models import Post, User
from inkwell.schemas.post import PostResponse
from inkwell.schemas.user import UserResponse
from inkwell.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UserIdDep, db: SessionDep) -> User:
    """Return a user's public profile."""
    return user_service.get_user(db, user_id)


@router.get("/{user_id}/posts", response_model=list[PostResponse])
def get_user_posts(user_id: UserIdDep, ctx: AuthContextDep, db: SessionDep) -> list[Post]:
    """List a user's posts.

    Everyone sees the published ones; the user also sees their own drafts.
    """
    return user_service.list_user_posts(db, ctx, user_id)
