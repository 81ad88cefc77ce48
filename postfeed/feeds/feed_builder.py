"""
Feed Builder
============
Builds the in-memory Atom document for a tenant's posts.

Responsibility: Map posts to entries and derive the feed-level timestamp
"""

from datetime import datetime
from typing import Optional, List, Iterable
import logging

from ..models.atom import (
    ATOM_CONTENT_TYPE,
    HTML_CONTENT_TYPE,
    AtomFeed,
    Author,
    Content,
    Entry,
    Link,
)
from ..models.post import Post, TenantInfo
from ..utils.time_utils import EPOCH, format_timestamp, is_after

logger = logging.getLogger(__name__)


class FeedBuilder:
    """
    Builds an Atom feed document from a tenant's posts.

    Entries keep the order in which posts are added. The feed "updated"
    value is the latest creation or response timestamp seen, starting from
    the Unix epoch, so an empty feed reports the epoch.

    Example:
        builder = FeedBuilder(
            tenant=TenantInfo(name="Acme", base_url="https://acme.example"),
        )
        for post in posts:
            builder.add_post_entry(post)
        feed = builder.build()
    """

    def __init__(self, tenant: TenantInfo, base_url: Optional[str] = None):
        """
        Initialize feed builder.

        Args:
            tenant: Tenant providing title and subtitle
            base_url: Base URL for ids and links (defaults to tenant.base_url)
        """
        self.tenant = tenant
        self.base_url = base_url if base_url is not None else tenant.base_url
        self.last_update: datetime = EPOCH
        self._entries: List[Entry] = []

    def post_url(self, post_id: int) -> str:
        """Human-facing URL of a post"""
        return f"{self.base_url}/posts/{post_id}"

    def post_feed_url(self, post_id: int) -> str:
        """Atom URL of a single post"""
        return f"{self.base_url}/feed/posts/{post_id}.atom"

    def feed_links(self) -> List[Link]:
        """Self and alternate links of the feed"""
        return [
            Link(href=f"{self.base_url}/feed.atom", type=ATOM_CONTENT_TYPE, rel="self"),
            Link(href=self.base_url, type=HTML_CONTENT_TYPE, rel="alternate"),
        ]

    def add_post_entry(self, post: Post) -> Entry:
        """
        Add an entry for a post.

        Args:
            post: Post to syndicate

        Returns:
            The created Entry
        """
        self.last_update = advance_last_update(self.last_update, post)

        updated = None
        if post.response is not None:
            updated = format_timestamp(post.response.responded_at)

        entry = Entry(
            title=post.title,
            id=self.post_url(post.id),
            published=format_timestamp(post.created_at),
            updated=updated,
            links=[
                Link(href=self.post_feed_url(post.id), type=ATOM_CONTENT_TYPE, rel="self"),
                Link(href=self.post_url(post.id), type=HTML_CONTENT_TYPE, rel="alternate"),
            ],
            author=Author(name=post.user.name),
            summary=Content(type="html", body=post.description),
        )

        self._entries.append(entry)
        return entry

    def build(self) -> AtomFeed:
        """Assemble the feed document from the entries added so far"""
        feed = AtomFeed(
            title=self.tenant.name,
            subtitle=Content(type="text", body=self.tenant.welcome_message),
            id=self.base_url,
            updated=format_timestamp(self.last_update),
            links=self.feed_links(),
            entries=list(self._entries),
        )
        logger.debug(f"Built feed for {self.base_url} with {len(feed.entries)} entries")
        return feed

    def get_entry_count(self) -> int:
        """Get the number of entries in the feed"""
        return len(self._entries)


def advance_last_update(current: datetime, post: Post) -> datetime:
    """Return the later of current and the post's creation/response timestamps"""
    if is_after(post.created_at, current):
        current = post.created_at
    if post.response is not None and is_after(post.response.responded_at, current):
        current = post.response.responded_at
    return current


def compute_last_updated(posts: Iterable[Post]) -> str:
    """
    Derive the feed-level "updated" timestamp.

    Args:
        posts: Posts in presentation order

    Returns:
        Latest creation/response timestamp, or the epoch when there are none
    """
    last_update = EPOCH
    for post in posts:
        last_update = advance_last_update(last_update, post)
    return format_timestamp(last_update)


def build_feed(tenant: TenantInfo, posts: Iterable[Post], base_url: Optional[str] = None) -> AtomFeed:
    """
    Build an Atom feed document for the given posts.

    Args:
        tenant: Tenant providing title and subtitle
        posts: Posts in presentation order; not mutated or reordered
        base_url: Base URL for ids and links (defaults to tenant.base_url)

    Returns:
        AtomFeed with one entry per post
    """
    builder = FeedBuilder(tenant=tenant, base_url=base_url)
    for post in posts:
        builder.add_post_entry(post)
    return builder.build()
