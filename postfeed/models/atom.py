"""
Atom document models.

In-memory form of an Atom 1.0 feed. Built fresh for every request by the
feed builder and rendered by the serializer; no persisted identity.

Optional elements and attributes use None (or 0 for link length) to mark
absence. An empty string is a present, empty value.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


ATOM_CONTENT_TYPE = "application/atom+xml"
HTML_CONTENT_TYPE = "text/html"


class Link(BaseModel):
    """Atom link element; only href is required"""

    rel: str = ""
    href: str
    type: str = ""
    hreflang: str = ""
    title: str = ""
    length: int = Field(default=0, ge=0)


class Author(BaseModel):
    """Atom person construct"""

    name: str
    uri: Optional[str] = None
    email: Optional[str] = None


class Content(BaseModel):
    """Text construct with a type attribute (text, html, xhtml)"""

    type: str = "text"
    body: str = ""


class Entry(BaseModel):
    """Single feed entry, one per post"""

    title: str
    id: str
    published: str
    updated: Optional[str] = None
    links: List[Link] = Field(default_factory=list)
    author: Optional[Author] = None
    summary: Optional[Content] = None
    content: Optional[Content] = None


class AtomFeed(BaseModel):
    """Atom feed document"""

    title: str
    subtitle: Content = Field(default_factory=Content)
    id: str
    updated: str
    links: List[Link] = Field(default_factory=list)
    author: Optional[Author] = None
    entries: List[Entry] = Field(default_factory=list)
