"""Shared Pydantic types for request validation and responses."""
from __future__ import annotations

import html
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints

POST_CONTENT_MIN_LENGTH = 32


def escape_html(value: str) -> str:
    """Escape markup so stored text renders literally."""
    return html.escape(value, quote=True)


TitleText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
    AfterValidator(escape_html),
]
PostBody = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=POST_CONTENT_MIN_LENGTH),
    AfterValidator(escape_html),
]
CommentBody = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=5000),
    AfterValidator(escape_html),
]


class AuthorSummary(BaseModel):
    """Public fields of a post or comment author."""

    id: str
    username: str

    model_config = ConfigDict(from_attributes=True)

