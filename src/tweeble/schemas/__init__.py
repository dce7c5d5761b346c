# src/tweeble/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .feed import AuthorProfile, FeedResponse, PostSummary, TagFeed, TrendingTag
from .post import LikeState, PostCreate
from .user import AuthResponse, LoginRequest, RegisterRequest, UserResponse

__all__ = [
    "AuthorProfile", "FeedResponse", "PostSummary", "TagFeed", "TrendingTag",
    "LikeState", "PostCreate",
    "AuthResponse", "LoginRequest", "RegisterRequest", "UserResponse",
]
