# src/tweeble/models/__init__.py
"""SQLAlchemy models for the Tweeble application."""

from .like import Like
from .post import Post
from .tag import PostTag, Tag
from .user import User

__all__ = [
    "Like",
    "Post",
    "PostTag", "Tag",
    "User",
]
