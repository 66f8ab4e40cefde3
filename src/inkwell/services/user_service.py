"""Registration, login and profile lookups."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inkwell.core.errors import ConflictError, NotFoundError, UnauthenticatedError
from inkwell.core.security import IssuedToken, TokenService, hash_password, verify_password
from inkwell.core.settings import settings
from inkwell.models import Post, User
from inkwell.repositories import PostRepository, UserRepository
from inkwell.schemas.user import LoginRequest, RegisterRequest
from inkwell.services.access_policy import AuthContext, ListingScope, post_listing_scope

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username already in use"
INVALID_CREDENTIALS = "Invalid username or password"


def register_user(db: Session, payload: RegisterRequest) -> User:
    """Create a new identity.

    Raises:
        ConflictError: The username is already registered, whatever the password.
    """
    users = UserRepository(db)
    if users.get_by_username(payload.username) is not None:
        raise ConflictError(USERNAME_TAKEN)

    user = User(
        username=payload.username,
        password_hash=hash_password(
            payload.password,
            opslimit=settings.password_opslimit,
            memlimit=settings.password_memlimit,
        ),
        is_admin=False,
    )
    try:
        users.add(user)
        db.commit()
    except IntegrityError as err:
        # Lost a race with a concurrent registration of the same name.
        db.rollback()
        raise ConflictError(USERNAME_TAKEN) from err

    db.refresh(user)
    logger.info("Registered user %s (%s)", user.username, user.id)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Return the identity matching the credentials, or None."""
    user = UserRepository(db).get_by_username(username)
    if user is None:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def login(db: Session, payload: LoginRequest, token_service: TokenService) -> IssuedToken:
    """Exchange credentials for a bearer token.

    Unknown usernames and wrong passwords fail identically.
    """
    user = authenticate(db, payload.username, payload.password)
    if user is None:
        logger.warning("Failed login attempt for username %r", payload.username)
        raise UnauthenticatedError(INVALID_CREDENTIALS)
    issued = token_service.issue(user.id)
    logger.info("Issued access token for user %s", user.id)
    return issued


def get_user(db: Session, user_id: str) -> User:
    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_user_posts(db: Session, ctx: AuthContext, user_id: str) -> list[Post]:
    """List an author's posts; drafts are included only for the author themself."""
    author = get_user(db, user_id)
    scope = post_listing_scope(ctx, author.id)
    return PostRepository(db).list_by_author(
        author.id,
        published_only=scope is ListingScope.PUBLISHED_ONLY,
    )


def set_admin(db: Session, username: str, is_admin: bool) -> User:
    """Grant or revoke administrator rights."""
    user = UserRepository(db).get_by_username(username)
    if user is None:
        raise NotFoundError("User not found")
    user.is_admin = is_admin
    db.commit()
    db.refresh(user)
    logger.info("Set is_admin=%s for user %s", is_admin, user.username)
    return user
