# src/tweeble/services/__init__.py
"""Business logic services for the Tweeble application."""

from .feed import author_feed, global_feed, summarize_posts, tag_feed
from .likes import toggle_like
from .post_service import create_post
from .tag_extractor import extract_tag_names
from .tag_resolver import TagResolver
from .trending import trending_tags
from .user_service import authenticate, register_user

__all__ = [
    "TagResolver",
    "author_feed",
    "authenticate",
    "create_post",
    "extract_tag_names",
    "global_feed",
    "register_user",
    "summarize_posts",
    "tag_feed",
    "toggle_like",
    "trending_tags",
]
