"""Service-level operations on posts and their comment threads."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from inkwell.core.errors import NotFoundError
from inkwell.models import Comment, Post
from inkwell.repositories import CommentRepository, PostRepository
from inkwell.schemas.comment import CommentCreate
from inkwell.schemas.post import PostCreate, PostUpdate
from inkwell.services.access_policy import (
    AuthContext,
    Operation,
    can_create_comment,
    can_mutate_post,
    can_view_comments,
    can_view_post,
    require_identity,
)

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"


def _load_post(repo: PostRepository, post_id: str) -> Post:
    post = repo.get_by_id(post_id)
    if post is None:
        raise NotFoundError(POST_NOT_FOUND)
    return post


def list_published_posts(db: Session, *, limit: int, offset: int = 0) -> list[Post]:
    return PostRepository(db).list_published(limit=limit, offset=offset)


def create_post(db: Session, ctx: AuthContext, payload: PostCreate) -> Post:
    """Create a post authored by the caller."""
    author_id = require_identity(ctx)
    post = Post(
        title=payload.title,
        author_id=author_id,
        content=payload.content,
        is_published=payload.is_published,
    )
    PostRepository(db).add(post)
    db.commit()
    db.refresh(post)
    logger.info("User %s created post %s (published=%s)", author_id, post.id, post.is_published)
    return post


def get_post(db: Session, ctx: AuthContext, post_id: str) -> Post:
    """Return a post the caller may see.

    Drafts belonging to someone else raise the same NotFoundError as a
    missing id.
    """
    post = _load_post(PostRepository(db), post_id)
    can_view_post(ctx, post).enforce(POST_NOT_FOUND)
    return post


def update_post(db: Session, ctx: AuthContext, post_id: str, payload: PostUpdate) -> Post:
    repo = PostRepository(db)
    post = _load_post(repo, post_id)
    can_mutate_post(ctx, post, Operation.UPDATE).enforce(POST_NOT_FOUND)

    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(post, field, value)
    db.commit()
    db.refresh(post)
    logger.info(
        "User %s updated post %s (%s)",
        ctx.identity_id,
        post.id,
        ", ".join(changes) or "no changes",
    )
    return post


def delete_post(db: Session, ctx: AuthContext, post_id: str) -> None:
    """Delete a post together with every comment it references.

    Linked comments are removed first, then the post, in a single commit.
    """
    posts = PostRepository(db)
    post = _load_post(posts, post_id)
    can_mutate_post(ctx, post, Operation.DELETE).enforce(POST_NOT_FOUND)

    comment_ids = posts.clear_comments(post)
    removed = CommentRepository(db).delete_many(comment_ids)
    posts.delete(post)
    db.commit()
    logger.info(
        "User %s deleted post %s and %d of %d linked comments",
        ctx.identity_id,
        post_id,
        removed,
        len(comment_ids),
    )


def list_post_comments(db: Session, ctx: AuthContext, post_id: str) -> list[Comment]:
    """Return a visible post's comments in creation order."""
    post = _load_post(PostRepository(db), post_id)
    can_view_comments(ctx, post).enforce(POST_NOT_FOUND)
    return CommentRepository(db).get_many(post.comment_ids)


def create_comment(
    db: Session,
    ctx: AuthContext,
    post_id: str,
    payload: CommentCreate,
) -> Comment:
    """Persist a comment and append it to the post's comment sequence.

    Both writes share one transaction, so a failure never leaves an
    unlinked comment behind.
    """
    posts = PostRepository(db)
    post = _load_post(posts, post_id)
    can_create_comment(ctx, post).enforce(POST_NOT_FOUND)
    author_id = require_identity(ctx)

    comment = CommentRepository(db).add(
        Comment(author_id=author_id, content=payload.content)
    )
    posts.append_comment(post, comment)
    db.commit()
    db.refresh(comment)
    logger.info("User %s commented %s on post %s", author_id, comment.id, post.id)
    return comment
