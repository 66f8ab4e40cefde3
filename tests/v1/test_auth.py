# tests/v1/test_auth.py
"""Tests for registration and login endpoints."""

from fastapi import status

from inkwell.models import User

REGISTER_URL = "/api/v1/auth/register"
LOGIN_URL = "/api/v1/auth/login"
PASSWORD = "correct-horse-battery"


def test_register_creates_user(client, db_session) -> None:
    response = client.post(REGISTER_URL, json={"username": "carol", "password": "long-enough-pw"})

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["username"] == "carol"
    assert data["is_admin"] is False
    assert len(data["id"]) == 32
    assert "password" not in data
    assert "password_hash" not in data

    stored = db_session.get(User, data["id"])
    assert stored is not None
    assert stored.password_hash != "long-enough-pw"


def test_register_duplicate_username_conflicts(client, author) -> None:
    """A taken username is rejected whatever password is supplied."""
    for password in (PASSWORD, "a-different-password"):
        response = client.post(REGISTER_URL, json={"username": author.username, "password": password})
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Username already in use"


def test_register_validates_payload(client) -> None:
    assert client.post(REGISTER_URL, json={"username": "dave"}).status_code == 422
    assert client.post(REGISTER_URL, json={"username": "dave", "password": "short"}).status_code == 422
    assert (
        client.post(REGISTER_URL, json={"username": "<b>dave</b>", "password": "long-enough-pw"}).status_code
        == 422
    )


def test_login_returns_bearer_token(client, author, token_service) -> None:
    response = client.post(LOGIN_URL, json={"username": "alice", "password": PASSWORD})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["expires_in"] > 0
    assert "expires_at" in data
    assert token_service.verify(data["access_token"]) == author.id


def test_login_failures_are_indistinguishable(client, author) -> None:
    wrong_password = client.post(LOGIN_URL, json={"username": "alice", "password": "wrong-password"})
    unknown_user = client.post(LOGIN_URL, json={"username": "nobody", "password": PASSWORD})

    for response in (wrong_password, unknown_user):
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"
    assert wrong_password.json() == unknown_user.json()


def test_registered_user_can_login_and_post(client) -> None:
    client.post(REGISTER_URL, json={"username": "erin", "password": "long-enough-pw"})
    login = client.post(LOGIN_URL, json={"username": "erin", "password": "long-enough-pw"})
    token = login.json()["access_token"]

    response = client.post(
        "/api/v1/posts/",
        json={"title": "Hello", "content": "x" * 40, "is_published": True},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["author"]["username"] == "erin"
