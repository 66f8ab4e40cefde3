# src/inkwell/db/time.py
"""Time helpers for model timestamps."""

from datetime import UTC, datetime
from typing import Protocol


class Timestamped(Protocol):
    updated_at: datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def touch(entity: Timestamped) -> None:
    """Bump ``updated_at`` for changes the ORM does not see as column updates."""
    entity.updated_at = utcnow()
