# src/inkwell/api/v1/endpoints/posts.py
"""Post-related endpoints for the Inkwell API."""

from fastapi import APIRouter, Query, status

from inkwell.api.v1.dependencies import (
    AuthContextDep,
    PostIdDep,
    RequiredAuthDep,
    SessionDep,
)
from inkwell.models import Comment, Post
from inkwell.schemas.comment import CommentCreate, CommentResponse
from inkwell.schemas.post import PostCreate, PostResponse, PostUpdate
from inkwell.services import post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
def list_posts(
    db: SessionDep,
    limit: int = Query(50, ge=1, le=100, description="Maximum number of posts to return"),
    offset: int = Query(0, ge=0, description="Number of posts to skip"),
) -> list[Post]:
    """List published posts, newest first."""
    return post_service.list_published_posts(db, limit=limit, offset=offset)


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, ctx: RequiredAuthDep, db: SessionDep) -> Post:
    """Create a post authored by the caller (a draft unless ``is_published``)."""
    return post_service.create_post(db, ctx, payload)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: PostIdDep, ctx: AuthContextDep, db: SessionDep) -> Post:
    """Get a specific post by ID.

    Another user's draft answers exactly like a missing post.
    """
    return post_service.get_post(db, ctx, post_id)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: PostIdDep,
    ctx: RequiredAuthDep,
    payload: PostUpdate,
    db: SessionDep,
) -> Post:
    """Update title, content or publication state of one's own post."""
    return post_service.update_post(db, ctx, post_id, payload)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: PostIdDep, ctx: RequiredAuthDep, db: SessionDep) -> None:
    """Delete one's own post and all of its comments."""
    post_service.delete_post(db, ctx, post_id)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
def get_post_comments(post_id: PostIdDep, ctx: AuthContextDep, db: SessionDep) -> list[Comment]:
    """List a visible post's comments in the order they were written."""
    return post_service.list_post_comments(db, ctx, post_id)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_post_comment(
    post_id: PostIdDep,
    ctx: RequiredAuthDep,
    payload: CommentCreate,
    db: SessionDep,
) -> Comment:
    """Comment on a published post, or on one's own draft."""
    return post_service.create_comment(db, ctx, post_id, payload)
