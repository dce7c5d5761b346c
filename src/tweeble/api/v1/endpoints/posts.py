# src/tweeble/api/v1/endpoints/posts.py
"""Post-related endpoints for the Tweeble API."""

from fastapi import APIRouter, status

from tweeble.schemas.feed import PostSummary
from tweeble.schemas.post import LikeState, PostCreate
from tweeble.services.feed import summarize_posts
from tweeble.services.likes import toggle_like
from tweeble.services.post_service import create_post

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostSummary, status_code=status.HTTP_201_CREATED)
async def create(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostSummary:
    """Create a post; peeps mentioned as ``<Name>`` are linked automatically."""
    post = create_post(db, author_id=current_user.id, content=post_data.content)
    return summarize_posts(db, [post.id], current_user.id)[0]


@router.post("/{post_id}/like", response_model=LikeState)
async def toggle(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> LikeState:
    """Like the post, or remove the like if the viewer already liked it."""
    return toggle_like(db, viewer_id=current_user.id, post_id=post_id)
