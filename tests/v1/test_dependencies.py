# tests/v1/test_dependencies.py
"""Tests for API dependencies module."""

import pytest
from fastapi import status
from fastapi.security import HTTPAuthorizationCredentials

from inkwell.api.v1.dependencies import (
    get_auth_context,
    require_auth_context,
    valid_post_id,
)
from inkwell.core.errors import MalformedRequestError, UnauthenticatedError
from inkwell.db.ids import new_id
from inkwell.services.access_policy import AuthContext


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetAuthContext:
    """Test the get_auth_context dependency function."""

    def test_no_credentials_is_anonymous(self, db_session, token_service):
        ctx = get_auth_context(None, db_session, token_service)
        assert ctx.is_anonymous

    def test_valid_token_identifies_user(self, db_session, token_service, author):
        token = token_service.issue(author.id).token

        ctx = get_auth_context(_bearer(token), db_session, token_service)

        assert ctx == AuthContext.identified(author.id, is_admin=False)

    def test_admin_flag_comes_from_the_database(self, db_session, token_service, admin):
        token = token_service.issue(admin.id).token
        ctx = get_auth_context(_bearer(token), db_session, token_service)
        assert ctx.is_privileged

    def test_expired_token_is_anonymous(self, db_session, expired_token_service, token_service, author):
        token = expired_token_service.issue(author.id).token
        assert get_auth_context(_bearer(token), db_session, token_service).is_anonymous

    def test_tampered_token_is_anonymous(self, db_session, token_service, author):
        token = token_service.issue(author.id).token
        header, payload, signature = token.split(".")
        swapped = ("B" if signature[0] == "A" else "A") + signature[1:]
        tampered = ".".join([header, payload, swapped])
        assert get_auth_context(_bearer(tampered), db_session, token_service).is_anonymous

    def test_unknown_subject_is_anonymous(self, db_session, token_service):
        token = token_service.issue(new_id()).token
        assert get_auth_context(_bearer(token), db_session, token_service).is_anonymous


class TestRequireAuthContext:
    def test_passes_identified_context_through(self):
        ctx = AuthContext.identified(new_id())
        assert require_auth_context(ctx) is ctx

    def test_rejects_anonymous(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            require_auth_context(AuthContext.anonymous())
        assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED


def test_valid_post_id_gate():
    post_id = new_id()
    assert valid_post_id(post_id) == post_id
    with pytest.raises(MalformedRequestError):
        valid_post_id("../etc/passwd")


def test_expired_token_on_protected_route(client, expired_token_service, author, published_post):
    token = expired_token_service.issue(author.id).token
    response = client.put(
        f"/api/v1/posts/{published_post.id}",
        json={"title": "x"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_token_for_deleted_user_is_rejected(client, db_session, headers_for, make_user):
    ghost = make_user("ghost")
    headers = headers_for(ghost)
    db_session.delete(ghost)
    db_session.commit()

    response = client.post(
        "/api/v1/posts/",
        json={"title": "t", "content": "x" * 40},
        headers=headers,
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
