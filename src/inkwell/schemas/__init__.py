"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse, CommentUpdate
from .common import AuthorSummary
from .post import PostCreate, PostResponse, PostUpdate
from .user import LoginRequest, LoginResponse, RegisterRequest, UserResponse

__all__ = [
    "AuthorSummary",
    "CommentCreate", "CommentResponse", "CommentUpdate",
    "LoginRequest", "LoginResponse", "RegisterRequest", "UserResponse",
    "PostCreate", "PostResponse", "PostUpdate",
]
