"""
Post Feed
=========
Atom 1.0 feed synthesis for tenant posts.

Posts and tenant metadata come in from collaborators; an Atom document
goes out as UTF-8 bytes.
"""

from .exceptions import (
    FeedError,
    UpstreamQueryError,
    SerializationError,
    FeedParseError,
)
from .feeds import FeedBuilder, build_feed, serialize_feed, parse_feed
from .models import Post, PostUser, PostResponse, TenantInfo, AtomFeed

__version__ = "1.0.0"

__all__ = [
    "FeedError",
    "UpstreamQueryError",
    "SerializationError",
    "FeedParseError",
    "FeedBuilder",
    "build_feed",
    "serialize_feed",
    "parse_feed",
    "Post",
    "PostUser",
    "PostResponse",
    "TenantInfo",
    "AtomFeed",
]
