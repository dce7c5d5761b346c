# src/tweeble/api/v1/endpoints/tags.py
"""Browse posts by peep."""

from fastapi import APIRouter

from tweeble.schemas.feed import TagFeed
from tweeble.services.feed import tag_feed

from ..dependencies import SessionDep, ViewerIdDep

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("/{name}", response_model=TagFeed)
async def get_tag_feed(name: str, db: SessionDep, viewer_id: ViewerIdDep) -> TagFeed:
    """Return recent posts mentioning ``name`` in any letter case."""
    return TagFeed(name=name, posts=tag_feed(db, name, viewer_id))
