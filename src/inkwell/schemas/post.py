"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import AuthorSummary, PostBody, TitleText


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: TitleText
    content: PostBody
    is_published: bool = Field(False, description="Publish immediately instead of saving a draft")


class PostUpdate(BaseModel):
    """Partial update of a post; omitted fields are left unchanged."""

    title: TitleText | None = None
    content: PostBody | None = None
    is_published: bool | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    title: str
    author: AuthorSummary
    content: str
    comment_ids: list[str]
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
