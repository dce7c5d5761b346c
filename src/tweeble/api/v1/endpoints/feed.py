# src/tweeble/api/v1/endpoints/feed.py
"""Global feed endpoints."""

from fastapi import APIRouter

from tweeble.schemas.feed import FeedResponse, TrendingTag
from tweeble.services.feed import global_feed
from tweeble.services.trending import trending_tags

from ..dependencies import SessionDep, ViewerIdDep

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("/", response_model=FeedResponse)
async def get_feed(db: SessionDep, viewer_id: ViewerIdDep) -> FeedResponse:
    """Return the newest posts and the trending peeps sidebar."""
    return FeedResponse(
        posts=global_feed(db, viewer_id),
        trending=trending_tags(db),
        is_authenticated=viewer_id is not None,
    )


@router.get("/trending", response_model=list[TrendingTag])
async def get_trending(db: SessionDep) -> list[TrendingTag]:
    """Return the peeps mentioned most in the last day."""
    return trending_tags(db)
