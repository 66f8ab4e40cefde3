"""Data access helpers for registered identities."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from inkwell.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    """Credential store backed by the ``users`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, user_id: str) -> User | None:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> User | None:
        result = self.session.execute(select(User).where(User.username == username))
        return result.scalars().first()

    def add(self, user: User) -> User:
        """Stage a new identity and flush so constraint violations surface here."""
        self.session.add(user)
        self.session.flush()
        return user
