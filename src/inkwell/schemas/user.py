"""User-related Pydantic schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Username = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=64,
        pattern=r"^[\w.@+-]+$",
    ),
]


class RegisterRequest(BaseModel):
    """Schema for account registration."""

    username: Username = Field(..., description="Unique login name")
    password: str = Field(..., min_length=8, max_length=256, description="Plaintext password")


class LoginRequest(BaseModel):
    """Schema for password login."""

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Bearer token returned after a successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type (always 'bearer')")
    expires_in: int = Field(..., description="Seconds until the token expires")
    expires_at: datetime = Field(..., description="Absolute expiry time (UTC)")


class UserResponse(BaseModel):
    """Public view of a registered identity."""

    id: str
    username: str
    is_admin: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
