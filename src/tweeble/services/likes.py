"""Like/unlike toggling for posts."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tweeble.core.exceptions import NotFound, Unauthenticated
from tweeble.db.time import utcnow
from tweeble.models import Like, Post
from tweeble.schemas.post import LikeState

logger = logging.getLogger(__name__)

__all__ = ["count_likes", "toggle_like"]


def count_likes(db: Session, post_id: int) -> int:
    """Return the number of likes on a post."""
    return int(
        db.execute(
            select(func.count()).select_from(Like).where(Like.post_id == post_id)
        ).scalar_one()
    )


def toggle_like(db: Session, *, viewer_id: str | None, post_id: int) -> LikeState:
    """Flip the viewer's like on a post.

    The toggle never reads before it writes: a conditional delete on the
    (user, post) key either removes an existing like, or touches nothing and a
    like is inserted. An insert rejected by the primary key means a concurrent
    toggle liked the post first, which leaves the post liked.

    Raises:
        Unauthenticated: If there is no viewer.
        NotFound: If the post does not exist.
        IntegrityError: If the insert fails for any reason other than an
            existing like, such as a viewer deleted mid-request.
    """
    if viewer_id is None:
        raise Unauthenticated()
    if db.get(Post, post_id) is None:
        raise NotFound("Post not found")

    try:
        removed = db.execute(
            delete(Like).where(Like.user_id == viewer_id, Like.post_id == post_id)
        ).rowcount
        liked = not removed
        if liked:
            try:
                with db.begin_nested():
                    db.add(Like(user_id=viewer_id, post_id=post_id, created_at=utcnow()))
            except IntegrityError:
                # Only a duplicate key means another toggle won the race.
                if db.get(Like, (viewer_id, post_id)) is None:
                    raise
                logger.info("Like by %s on post %s already recorded", viewer_id, post_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("User %s %s post %s", viewer_id, "liked" if liked else "unliked", post_id)
    return LikeState(post_id=post_id, liked=liked, like_count=count_likes(db, post_id))
