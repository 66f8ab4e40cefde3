"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from inkwell.db.time import touch
from inkwell.models.comment import Comment
from inkwell.models.post import Post, PostCommentLink

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, post_id: str) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def list_published(self, *, limit: int, offset: int = 0) -> list[Post]:
        """Return published posts, newest first."""
        result = self.session.execute(
            select(Post)
            .where(Post.is_published.is_(True))
            .order_by(Post.created_at.desc(), Post.id)
            .limit(limit)
            .offset(offset)
        )
        return list(result.unique().scalars())

    def list_by_author(self, author_id: str, *, published_only: bool) -> list[Post]:
        """Return posts written by ``author_id``, newest first."""
        stmt = select(Post).where(Post.author_id == author_id)
        if published_only:
            stmt = stmt.where(Post.is_published.is_(True))
        stmt = stmt.order_by(Post.created_at.desc(), Post.id)
        result = self.session.execute(stmt)
        return list(result.unique().scalars())

    def find_by_comment(self, comment_id: str) -> Post | None:
        """Return the post whose comment sequence contains ``comment_id``."""
        result = self.session.execute(
            select(Post)
            .join(PostCommentLink, PostCommentLink.post_id == Post.id)
            .where(PostCommentLink.comment_id == comment_id)
        )
        return result.unique().scalars().first()

    def add(self, post: Post) -> Post:
        self.session.add(post)
        self.session.flush()
        return post

    def append_comment(self, post: Post, comment: Comment) -> None:
        """Append ``comment`` to the end of the post's comment sequence."""
        post.comment_links.append(PostCommentLink(comment_id=comment.id))
        touch(post)
        self.session.flush()

    def remove_comment(self, post: Post, comment_id: str) -> bool:
        """Drop ``comment_id`` from the post's sequence; return True if it was there."""
        remaining = [link for link in post.comment_links if link.comment_id != comment_id]
        if len(remaining) == len(post.comment_links):
            return False
        post.comment_links = remaining
        touch(post)
        self.session.flush()
        return True

    def clear_comments(self, post: Post) -> list[str]:
        """Empty the post's comment sequence and return the ids it held."""
        comment_ids = post.comment_ids
        post.comment_links.clear()
        self.session.flush()
        return comment_ids

    def delete(self, post: Post) -> None:
        self.session.delete(post)
        self.session.flush()
