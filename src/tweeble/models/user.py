"""SQLAlchemy model for registered accounts."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tweeble.db.session import Base
from tweeble.db.time import utcnow

USERNAME_MAX_LENGTH = 16
DESCRIPTION_MAX_LENGTH = 300


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Registered account; owns posts and likes."""

    __tablename__ = "user_account"

    # Opaque identifier, also the JWT subject.
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_user_id)
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH),
        unique=True,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
