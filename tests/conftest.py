# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from nacl import pwhash
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("PASSWORD_OPSLIMIT", str(pwhash.argon2id.OPSLIMIT_MIN))
os.environ.setdefault("PASSWORD_MEMLIMIT", str(pwhash.argon2id.MEMLIMIT_MIN))

from inkwell.api.v1.dependencies import get_token_service
from inkwell.core.security import TokenConfig, TokenService, hash_password
from inkwell.db.session import Base, create_tables
from inkwell.db.session import get_db as app_get_session
from inkwell.main import app as fastapi_app
from inkwell.models import Comment, Post, PostCommentLink, User

TEST_DB_URL = "sqlite://"
DEFAULT_PASSWORD = "correct-horse-battery"
LONG_CONTENT = "This body is comfortably longer than thirty-two characters."


def _fast_hash(password: str) -> str:
    return hash_password(
        password,
        opslimit=pwhash.argon2id.OPSLIMIT_MIN,
        memlimit=pwhash.argon2id.MEMLIMIT_MIN,
    )


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def token_service() -> TokenService:
    return get_token_service()


@pytest.fixture()
def expired_token_service() -> TokenService:
    """A token service whose tokens are already expired when issued."""
    config = get_token_service().config
    return TokenService(
        TokenConfig(
            secret_key=config.secret_key,
            algorithm=config.algorithm,
            ttl=timedelta(seconds=-60),
        )
    )


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with a known password."""

    def _make_user(
        username: str,
        *,
        password: str = DEFAULT_PASSWORD,
        is_admin: bool = False,
    ) -> User:
        user = User(username=username, password_hash=_fast_hash(password), is_admin=is_admin)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def author(make_user: Callable[..., User]) -> User:
    """The user who owns the post fixtures."""
    return make_user("alice")


@pytest.fixture()
def reader(make_user: Callable[..., User]) -> User:
    """An authenticated user who owns nothing."""
    return make_user("bob")


@pytest.fixture()
def admin(make_user: Callable[..., User]) -> User:
    return make_user("root", is_admin=True)


@pytest.fixture()
def headers_for(token_service: TokenService) -> Callable[[User], dict[str, str]]:
    def _headers_for(user: User) -> dict[str, str]:
        token = token_service.issue(user.id).token
        return {"Authorization": f"Bearer {token}"}

    return _headers_for


@pytest.fixture()
def author_headers(author: User, headers_for) -> dict[str, str]:
    return headers_for(author)


@pytest.fixture()
def reader_headers(reader: User, headers_for) -> dict[str, str]:
    return headers_for(reader)


@pytest.fixture()
def admin_headers(admin: User, headers_for) -> dict[str, str]:
    return headers_for(admin)


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    def _make_post(
        owner: User,
        *,
        title: str = "A post",
        content: str = LONG_CONTENT,
        is_published: bool = False,
    ) -> Post:
        post = Post(
            title=title,
            author_id=owner.id,
            content=content,
            is_published=is_published,
        )
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post


@pytest.fixture()
def draft_post(author: User, make_post) -> Post:
    return make_post(author, title="Draft", is_published=False)


@pytest.fixture()
def published_post(author: User, make_post) -> Post:
    return make_post(author, title="Published", is_published=True)


@pytest.fixture()
def make_comment(db_session: Session) -> Callable[..., Comment]:
    def _make_comment(owner: User, post: Post | None, content: str = "Nice post") -> Comment:
        comment = Comment(author_id=owner.id, content=content)
        db_session.add(comment)
        db_session.flush()
        if post is not None:
            post.comment_links.append(PostCommentLink(comment_id=comment.id))
        db_session.commit()
        db_session.refresh(comment)
        return comment

    return _make_comment


@pytest.fixture()
def reader_comment(reader: User, published_post: Post, make_comment) -> Comment:
    """A comment by ``reader`` on ``published_post``."""
    return make_comment(reader, published_post, "First!")
