"""
Feeds Module
============
Atom feed generation for tenant posts.

Exports:
    - FeedBuilder: Builds the in-memory Atom document
    - build_feed: One-shot builder for a list of posts
    - compute_last_updated: Feed-level "updated" derivation
    - serialize_feed: Render a document to XML bytes
    - parse_feed: Read a serialized document back
"""

from .feed_builder import (
    FeedBuilder,
    advance_last_update,
    build_feed,
    compute_last_updated,
)

from .serializer import (
    ATOM_NS,
    XML_HEADER,
    build_tree,
    serialize_feed,
    parse_feed,
)

__all__ = [
    # Builder
    'FeedBuilder',
    'advance_last_update',
    'build_feed',
    'compute_last_updated',

    # Serializer
    'ATOM_NS',
    'XML_HEADER',
    'build_tree',
    'serialize_feed',
    'parse_feed',
]
