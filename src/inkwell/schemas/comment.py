"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .common import AuthorSummary, CommentBody


class CommentCreate(BaseModel):
    """Schema for adding a comment to a post."""

    content: CommentBody


class CommentUpdate(BaseModel):
    """Schema for editing a comment."""

    content: CommentBody


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: str
    author: AuthorSummary
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
