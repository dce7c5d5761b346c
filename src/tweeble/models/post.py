"""SQLAlchemy model for posts ("chirps")."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tweeble.db.session import Base
from tweeble.db.time import utcnow

if TYPE_CHECKING:
    from .tag import PostTag

POST_MAX_LENGTH = 123


class Post(Base):
    """Short text message authored by a user.

    Posts are immutable once stored; the tag links are written in the same
    transaction as the post itself.
    """

    __tablename__ = "post"
    __table_args__ = (Index("ix_post_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[str] = mapped_column(
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(String(POST_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Feeds load links with explicit queries; lazy loading is disabled.
    tag_links: Mapped[list[PostTag]] = relationship(
        "PostTag",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PostTag.position",
        lazy="raise",
    )
