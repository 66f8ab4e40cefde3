# src/inkwell/api/v1/endpoints/auth.py
"""Authentication endpoints for the Inkwell API."""

from __future__ import annotations

from fastapi import APIRouter, status

from inkwell.api.v1.dependencies import SessionDep, TokenServiceDep
from inkwell.models import User
from inkwell.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from inkwell.services import user_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={status.HTTP_409_CONFLICT: {"description": "Username already in use"}},
)
def register_user(payload: RegisterRequest, db: SessionDep) -> User:
    """Create an account from a username and password."""
    return user_service.register_user(db, payload)


@router.post(
    "/login",
    summary="Exchange credentials for a bearer token",
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Invalid username or password"}},
)
def login_user(
    payload: LoginRequest,
    db: SessionDep,
    token_service: TokenServiceDep,
) -> LoginResponse:
    """Authenticate with username and password."""
    issued = user_service.login(db, payload, token_service)
    return LoginResponse(
        access_token=issued.token,
        token_type="bearer",
        expires_in=issued.expires_in,
        expires_at=issued.expires_at,
    )
