"""Rank tags by how often recent posts mention them."""
from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tweeble.core.settings import settings
from tweeble.db.time import utcnow
from tweeble.models import Post, PostTag, Tag
from tweeble.schemas.feed import TrendingTag

__all__ = ["trending_tags"]


def trending_tags(db: Session, now: datetime | None = None) -> list[TrendingTag]:
    """Return the most mentioned tags in the trailing window.

    Counts post-tag links whose post was created within
    ``settings.trending_window_hours`` of ``now``. Ties are broken by name so
    the ranking is deterministic.
    """
    since = (now or utcnow()) - timedelta(hours=settings.trending_window_hours)
    mentions = func.count(PostTag.post_id).label("mentions")
    rows = db.execute(
        select(Tag.name, mentions)
        .join(PostTag, PostTag.tag_id == Tag.id)
        .join(Post, Post.id == PostTag.post_id)
        .where(Post.created_at >= since)
        .group_by(Tag.name)
        .order_by(mentions.desc(), Tag.name.asc())
        .limit(settings.trending_limit)
    ).all()
    return [TrendingTag(name=name, count=int(count)) for name, count in rows]
