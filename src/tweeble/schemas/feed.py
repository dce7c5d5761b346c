"""Schemas for display-ready feed data."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostSummary(BaseModel):
    """A post flattened together with its author, likes and tags."""

    id: int
    username: str = Field(..., description="Author display name")
    content: str
    created_at: datetime
    like_count: int = 0
    liked_by_viewer: bool = False
    tags: list[str] = Field(default_factory=list, description="Tag names in mention order")


class TrendingTag(BaseModel):
    """A tag and how many recent posts mention it."""

    name: str
    count: int


class FeedResponse(BaseModel):
    """Global feed page with the trending sidebar."""

    posts: list[PostSummary]
    trending: list[TrendingTag]
    is_authenticated: bool


class AuthorProfile(BaseModel):
    """Public profile of a user with engagement totals and recent posts."""

    username: str
    description: str | None = None
    created_at: datetime
    post_count: int
    likes_received: int
    likes_given: int
    posts: list[PostSummary]

    model_config = ConfigDict(from_attributes=True)


class TagFeed(BaseModel):
    """Posts mentioning a tag, echoing the name as requested."""

    name: str
    posts: list[PostSummary]
