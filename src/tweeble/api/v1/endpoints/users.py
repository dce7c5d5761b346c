# src/tweeble/api/v1/endpoints/users.py
"""Public user profile endpoints."""

from fastapi import APIRouter

from tweeble.schemas.feed import AuthorProfile
from tweeble.services.feed import author_feed

from ..dependencies import SessionDep, ViewerIdDep

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{username}", response_model=AuthorProfile)
async def get_profile(username: str, db: SessionDep, viewer_id: ViewerIdDep) -> AuthorProfile:
    """Return a user's profile, totals and most recent posts."""
    return author_feed(db, username, viewer_id)
