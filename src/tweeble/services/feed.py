"""Assemble display-ready feeds of posts.

Every feed is built from a fixed number of explicit queries: one for the page
of posts joined to their authors, then one each for like counts, the viewer's
own likes and tag names, all keyed by the page's post ids. Nothing relies on
lazy loading, so the query count does not grow with the page size.
"""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from tweeble.core.exceptions import NotFound
from tweeble.core.settings import settings
from tweeble.models import Like, Post, PostTag, Tag, User
from tweeble.schemas.feed import AuthorProfile, PostSummary

__all__ = [
    "author_feed",
    "global_feed",
    "summarize_posts",
    "tag_feed",
]

# (post id, author username, content, created_at)
_PostRow = tuple[int, str, str, datetime]


def _post_page(db: Session, stmt: Select, limit: int) -> list[_PostRow]:
    stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc()).limit(limit)
    return [tuple(row) for row in db.execute(stmt).all()]


def _base_query() -> Select:
    return select(Post.id, User.username, Post.content, Post.created_at).join(
        User, User.id == Post.author_id
    )


def _like_counts(db: Session, post_ids: Sequence[int]) -> dict[int, int]:
    rows = db.execute(
        select(Like.post_id, func.count())
        .where(Like.post_id.in_(post_ids))
        .group_by(Like.post_id)
    ).all()
    return {post_id: int(count) for post_id, count in rows}


def _liked_by(db: Session, post_ids: Sequence[int], viewer_id: str | None) -> set[int]:
    if viewer_id is None:
        return set()
    rows = db.execute(
        select(Like.post_id).where(Like.user_id == viewer_id, Like.post_id.in_(post_ids))
    ).scalars()
    return set(rows)


def _tag_names(db: Session, post_ids: Sequence[int]) -> dict[int, list[str]]:
    rows = db.execute(
        select(PostTag.post_id, Tag.name)
        .join(Tag, Tag.id == PostTag.tag_id)
        .where(PostTag.post_id.in_(post_ids))
        .order_by(PostTag.post_id, PostTag.position)
    ).all()
    names: dict[int, list[str]] = defaultdict(list)
    for post_id, name in rows:
        names[post_id].append(name)
    return names


def _summaries(
    db: Session,
    rows: Sequence[_PostRow],
    viewer_id: str | None,
) -> list[PostSummary]:
    if not rows:
        return []
    post_ids = [row[0] for row in rows]
    counts = _like_counts(db, post_ids)
    liked = _liked_by(db, post_ids, viewer_id)
    tags = _tag_names(db, post_ids)
    return [
        PostSummary(
            id=post_id,
            username=username,
            content=content,
            created_at=created_at,
            like_count=counts.get(post_id, 0),
            liked_by_viewer=post_id in liked,
            tags=tags.get(post_id, []),
        )
        for post_id, username, content, created_at in rows
    ]


def summarize_posts(
    db: Session,
    post_ids: Sequence[int],
    viewer_id: str | None = None,
) -> list[PostSummary]:
    """Return summaries for specific posts, newest first."""
    if not post_ids:
        return []
    rows = _post_page(db, _base_query().where(Post.id.in_(post_ids)), len(post_ids))
    return _summaries(db, rows, viewer_id)


def global_feed(db: Session, viewer_id: str | None) -> list[PostSummary]:
    """Return the most recent posts across all users.

    Authenticated viewers get ``settings.feed_size_authenticated`` posts,
    anonymous viewers ``settings.feed_size_anonymous``.
    """
    limit = (
        settings.feed_size_authenticated if viewer_id is not None else settings.feed_size_anonymous
    )
    return _summaries(db, _post_page(db, _base_query(), limit), viewer_id)


def tag_feed(db: Session, name: str | None, viewer_id: str | None = None) -> list[PostSummary]:
    """Return recent posts mentioning a tag, matched case-insensitively.

    Raises:
        NotFound: If ``name`` is empty or whitespace.
    """
    if name is None or not name.strip():
        raise NotFound("Peep not found")

    search = name.lower()
    tagged = (
        select(PostTag.post_id)
        .join(Tag, Tag.id == PostTag.tag_id)
        .where(func.lower(Tag.name) == search)
    )
    rows = _post_page(db, _base_query().where(Post.id.in_(tagged)), settings.tag_feed_size)
    return _summaries(db, rows, viewer_id)


def author_feed(db: Session, username: str | None, viewer_id: str | None = None) -> AuthorProfile:
    """Return a user's profile with totals and their most recent posts.

    Raises:
        NotFound: If ``username`` is blank or matches no user (case-insensitive).
    """
    if username is None or not username.strip():
        raise NotFound("User not found")

    user = db.execute(
        select(User).where(func.lower(User.username) == username.lower())
    ).scalars().first()
    if user is None:
        raise NotFound("User not found")

    post_count = db.execute(
        select(func.count()).select_from(Post).where(Post.author_id == user.id)
    ).scalar_one()
    likes_received = db.execute(
        select(func.count())
        .select_from(Like)
        .join(Post, Post.id == Like.post_id)
        .where(Post.author_id == user.id)
    ).scalar_one()
    likes_given = db.execute(
        select(func.count()).select_from(Like).where(Like.user_id == user.id)
    ).scalar_one()

    rows = _post_page(
        db,
        _base_query().where(Post.author_id == user.id),
        settings.profile_feed_size,
    )
    return AuthorProfile(
        username=user.username,
        description=user.description,
        created_at=user.created_at,
        post_count=int(post_count),
        likes_received=int(likes_received),
        likes_given=int(likes_given),
        posts=_summaries(db, rows, viewer_id),
    )
