"""
Models package for the post feed core.

This package contains all Pydantic models for:
- Collaborator inputs (posts, tenants)
- The Atom document structure
"""

from .post import (
    Post,
    PostUser,
    PostResponse,
    TenantInfo,
)
from .atom import (
    ATOM_CONTENT_TYPE,
    HTML_CONTENT_TYPE,
    AtomFeed,
    Entry,
    Link,
    Author,
    Content,
)

__all__ = [
    "Post",
    "PostUser",
    "PostResponse",
    "TenantInfo",
    "ATOM_CONTENT_TYPE",
    "HTML_CONTENT_TYPE",
    "AtomFeed",
    "Entry",
    "Link",
    "Author",
    "Content",
]
