"""Access policy engine for posts and comments.

Every function here is pure: it receives the caller's :class:`AuthContext`
and the ownership/visibility attributes of a resource, and returns a
:class:`Decision`. Nothing in this module touches the database.

Two rules shape most of the outcomes:

* Unpublished posts are hidden. A caller who may not see a draft gets
  ``NOT_FOUND``, exactly what a missing post produces. Mutation attempts on
  someone else's draft are masked the same way; on a published post they
  are ``FORBIDDEN`` because its existence is already public.
* Administrators are ownership-equivalent for comments only. Privilege never
  reveals a draft and never grants post mutation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from inkwell.core.errors import (
    ForbiddenError,
    InkwellError,
    MalformedRequestError,
    NotFoundError,
    UnauthenticatedError,
)
from inkwell.db.ids import is_valid_id

__all__ = [
    "AuthContext",
    "Decision",
    "ListingScope",
    "Operation",
    "Outcome",
    "can_create_comment",
    "can_modify_comment",
    "can_mutate_post",
    "can_view_comment",
    "can_view_comments",
    "can_view_post",
    "ensure_valid_id",
    "post_listing_scope",
    "require_identity",
]


class OwnedResource(Protocol):
    """Anything with an immutable author."""

    author_id: str


class PublishableResource(OwnedResource, Protocol):
    """An owned resource whose visibility depends on a publication flag."""

    is_published: bool


@dataclass(frozen=True)
class AuthContext:
    """Authentication state of the caller for one request."""

    identity_id: str | None = None
    is_admin: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.identity_id is None

    @property
    def is_identified(self) -> bool:
        return self.identity_id is not None

    @property
    def is_privileged(self) -> bool:
        """Identified and flagged as administrator."""
        return self.is_identified and self.is_admin

    def owns(self, resource: OwnedResource) -> bool:
        return self.is_identified and self.identity_id == resource.author_id

    @classmethod
    def anonymous(cls) -> AuthContext:
        return cls()

    @classmethod
    def identified(cls, identity_id: str, *, is_admin: bool = False) -> AuthContext:
        return cls(identity_id=identity_id, is_admin=is_admin)


class Outcome(enum.Enum):
    ALLOW = "allow"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


class Operation(enum.Enum):
    UPDATE = "update"
    DELETE = "delete"


class ListingScope(enum.Enum):
    ALL = "all"
    PUBLISHED_ONLY = "published_only"


_ERRORS: dict[Outcome, type[InkwellError]] = {
    Outcome.UNAUTHENTICATED: UnauthenticatedError,
    Outcome.FORBIDDEN: ForbiddenError,
    Outcome.NOT_FOUND: NotFoundError,
}


@dataclass(frozen=True)
class Decision:
    """Result of a policy check."""

    outcome: Outcome
    reason: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.ALLOW

    def enforce(self, not_found_detail: str) -> None:
        """Raise the error matching this decision; do nothing on ALLOW.

        ``not_found_detail`` is the message used for both genuine absence and
        masked denials, so the two cannot be told apart by the caller.
        """
        if self.allowed:
            return
        error_cls = _ERRORS[self.outcome]
        if self.outcome is Outcome.NOT_FOUND:
            raise error_cls(not_found_detail)
        raise error_cls(self.reason)


ALLOW = Decision(Outcome.ALLOW)


def _deny(outcome: Outcome, reason: str | None = None) -> Decision:
    return Decision(outcome, reason)


# ---------------------------------------------------------------------------
# Input gate
# ---------------------------------------------------------------------------


def ensure_valid_id(value: str) -> str:
    """Return ``value`` if it is a well-formed resource id.

    Raises:
        MalformedRequestError: The id is not syntactically valid. This is
            checked before any lookup or policy decision.
    """
    if not is_valid_id(value):
        raise MalformedRequestError("Malformed identifier")
    return value


def require_identity(ctx: AuthContext) -> str:
    """Return the caller's identity id, rejecting anonymous callers."""
    if ctx.identity_id is None:
        raise UnauthenticatedError()
    return ctx.identity_id


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


def can_view_post(ctx: AuthContext, post: PublishableResource) -> Decision:
    if post.is_published or ctx.owns(post):
        return ALLOW
    return _deny(Outcome.NOT_FOUND)


def can_mutate_post(
    ctx: AuthContext,
    post: PublishableResource,
    op: Operation,
) -> Decision:
    """Only the author may update or delete a post.

    Privilege does not apply here. A refused caller learns the post exists
    only if it is published.
    """
    if ctx.owns(post):
        return ALLOW
    if post.is_published:
        return _deny(Outcome.FORBIDDEN, f"You can only {op.value} your own posts")
    return _deny(Outcome.NOT_FOUND)


def post_listing_scope(ctx: AuthContext, target_identity_id: str) -> ListingScope:
    """Narrow a per-author listing; never denies."""
    if ctx.is_identified and ctx.identity_id == target_identity_id:
        return ListingScope.ALL
    return ListingScope.PUBLISHED_ONLY


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


def can_view_comments(ctx: AuthContext, post: PublishableResource) -> Decision:
    return can_view_post(ctx, post)


def can_create_comment(ctx: AuthContext, post: PublishableResource) -> Decision:
    if ctx.is_anonymous:
        return _deny(Outcome.UNAUTHENTICATED)
    if post.is_published or ctx.owns(post):
        return ALLOW
    return _deny(Outcome.NOT_FOUND)


def can_view_comment(
    ctx: AuthContext,
    comment: OwnedResource,
    parent: PublishableResource | None,
) -> Decision:
    """A linked comment is as visible as its post; an orphan is public."""
    if parent is None:
        return ALLOW
    return can_view_post(ctx, parent)


def can_modify_comment(
    ctx: AuthContext,
    comment: OwnedResource,
    op: Operation,
) -> Decision:
    """Authors and administrators may update or delete a comment.

    Denial is always FORBIDDEN: comments have no publication state to hide.
    """
    if ctx.is_anonymous:
        return _deny(Outcome.UNAUTHENTICATED)
    if ctx.owns(comment) or ctx.is_privileged:
        return ALLOW
    return _deny(Outcome.FORBIDDEN, f"You can only {op.value} your own comments")
