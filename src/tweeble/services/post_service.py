"""Service-level helpers for creating posts."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from tweeble.core.exceptions import Unauthenticated, ValidationError
from tweeble.db.time import utcnow
from tweeble.models.post import POST_MAX_LENGTH, Post
from tweeble.models.tag import PostTag
from tweeble.services.tag_extractor import extract_tag_names
from tweeble.services.tag_resolver import TagResolver

logger = logging.getLogger(__name__)

__all__ = ["POST_LENGTH_MESSAGE", "create_post", "validate_content"]

POST_LENGTH_MESSAGE = (
    f"Chirps must not be empty and may contain a maximum of {POST_MAX_LENGTH} characters."
)


def validate_content(content: str | None) -> str:
    """Return the trimmed content or raise ``ValidationError``.

    The length limit applies to the text as submitted, before trimming.
    """
    if content is None or not content.strip() or len(content) > POST_MAX_LENGTH:
        raise ValidationError.for_field("content", POST_LENGTH_MESSAGE)
    return content.strip()


def create_post(db: Session, *, author_id: str | None, content: str | None) -> Post:
    """Create a post and link every peep it mentions.

    Args:
        db: Session used for the whole unit of work.
        author_id: Identifier of the authenticated author.
        content: Raw text submitted by the client.

    Returns:
        The committed ``Post``.

    Raises:
        Unauthenticated: If no author is given.
        ValidationError: If the content is blank or too long.

    Notes:
        New ``Tag`` rows may be created as a side effect. Tags, post and links
        are committed together; on any failure the transaction is rolled back.
    """
    if author_id is None:
        raise Unauthenticated()
    text = validate_content(content)

    try:
        tags = TagResolver(db).resolve_all(extract_tag_names(text))
        post = Post(
            author_id=author_id,
            content=text,
            created_at=utcnow(),
            tag_links=[PostTag(tag=tag, position=index) for index, tag in enumerate(tags)],
        )
        db.add(post)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("User %s created post %s with %d tag(s)", author_id, post.id, len(tags))
    return post
