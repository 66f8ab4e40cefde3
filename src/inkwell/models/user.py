# src/inkwell/models/user.py
"""SQLAlchemy model for registered identities."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.db.ids import RESOURCE_ID_LENGTH, new_id
from inkwell.db.session import Base
from inkwell.db.time import utcnow


class User(Base):
    """A registered account: unique username plus an Argon2id password hash."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(RESOURCE_ID_LENGTH),
        primary_key=True,
        default=new_id,
    )
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
