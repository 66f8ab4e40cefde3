"""Error taxonomy shared by services and request handlers.

Every error is request-scoped and carries the HTTP status it is rendered
with. ``inkwell.main`` installs a single handler for :class:`InkwellError`.
"""

from __future__ import annotations

from fastapi import status


class InkwellError(Exception):
    """Base class for all expected request failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class MalformedRequestError(InkwellError):
    """A supplied identifier or required value is syntactically invalid."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Malformed request"


class UnauthenticatedError(InkwellError):
    """Missing, invalid or expired credentials on a path that needs them."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class ForbiddenError(InkwellError):
    """The caller is known but may not perform the action."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFoundError(InkwellError):
    """The resource is absent, or its existence is hidden from the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(InkwellError):
    """The request collides with existing state (e.g. a taken username)."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"
