"""Shared API dependencies for authentication and common functionality."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from inkwell.core.errors import UnauthenticatedError
from inkwell.core.security import TokenConfig, TokenService
from inkwell.core.settings import settings
from inkwell.db.session import get_db
from inkwell.repositories import UserRepository
from inkwell.services.access_policy import AuthContext, ensure_valid_id

# Bearer scheme that tolerates a missing header; read paths serve anonymous callers.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


@lru_cache
def get_token_service() -> TokenService:
    """Return the process-wide token service built from settings."""
    return TokenService(TokenConfig.from_settings(settings))


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
    token_service: TokenServiceDep,
) -> AuthContext:
    """Resolve the caller's authentication state.

    Missing, expired or invalid tokens, and tokens naming an unknown user,
    all resolve to an anonymous context.
    """
    if credentials is None:
        return AuthContext.anonymous()

    identity_id = token_service.verify(credentials.credentials)
    if identity_id is None:
        return AuthContext.anonymous()

    user = UserRepository(db).get_by_id(identity_id)
    if user is None:
        return AuthContext.anonymous()
    return AuthContext.identified(user.id, is_admin=user.is_admin)


def require_auth_context(
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
) -> AuthContext:
    """Like :func:`get_auth_context` but rejects anonymous callers.

    Raises:
        UnauthenticatedError: No valid bearer token was presented.
    """
    if ctx.is_anonymous:
        raise UnauthenticatedError()
    return ctx


def valid_post_id(post_id: str) -> str:
    return ensure_valid_id(post_id)


def valid_comment_id(comment_id: str) -> str:
    return ensure_valid_id(comment_id)


def valid_user_id(user_id: str) -> str:
    return ensure_valid_id(user_id)


# Type aliases for route signatures. Id aliases must be declared before the
# auth aliases so malformed ids are rejected before credentials are checked.
AuthContextDep = Annotated[AuthContext, Depends(get_auth_context)]
RequiredAuthDep = Annotated[AuthContext, Depends(require_auth_context)]
PostIdDep = Annotated[str, Depends(valid_post_id)]
CommentIdDep = Annotated[str, Depends(valid_comment_id)]
UserIdDep = Annotated[str, Depends(valid_user_id)]
