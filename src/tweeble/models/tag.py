"""Models for peep tags and their links to posts."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tweeble.db.session import Base

TAG_MIN_LENGTH = 3
TAG_MAX_LENGTH = 16


class Tag(Base):
    """A peep: short alphanumeric name mentioned as ``<Name>`` in posts.

    Names are unique by exact (case-sensitive) value; browsing by tag folds
    case at query time instead.
    """

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(TAG_MAX_LENGTH), unique=True, nullable=False)


class PostTag(Base):
    """Link between a post and a tag it mentions."""

    __tablename__ = "post_tag"

    post_id: Mapped[int] = mapped_column(
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tag.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    # First-mention order of the tag inside the post.
    position: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)

    tag: Mapped[Tag] = relationship("Tag", lazy="raise")
