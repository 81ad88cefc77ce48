"""
Services package for the post feed core.
"""

from .feed_service import FeedService, FeedResponse, SearchPosts, PostSearcher

__all__ = [
    "FeedService",
    "FeedResponse",
    "SearchPosts",
    "PostSearcher",
]
