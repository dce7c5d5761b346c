"""Post-related Pydantic schemas."""

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Length rules live in the post service so that form submissions and direct
    service calls report the same error.
    """

    content: str = Field(..., description="Post text; may mention peeps as <Name>")


class LikeState(BaseModel):
    """Result of toggling a like."""

    post_id: int
    liked: bool = Field(..., description="True if the viewer now likes the post")
    like_count: int = Field(..., ge=0, description="Total likes after the toggle")
