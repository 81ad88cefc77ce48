"""
Feed service for tenant post feeds.

Composes the search collaborator, the feed builder and the serializer
into the global Atom feed served for a tenant.

Responsibility: Run the post query and turn its result into a feed response
"""

from typing import Callable, List, Optional
import logging

from pydantic import BaseModel, Field

from ..config import FeedConfig, settings
from ..exceptions import UpstreamQueryError
from ..feeds.feed_builder import build_feed
from ..feeds.serializer import serialize_feed
from ..models.atom import ATOM_CONTENT_TYPE
from ..models.post import Post, TenantInfo

logger = logging.getLogger(__name__)


class SearchPosts(BaseModel):
    """Query handed to the post search collaborator"""

    query: str = Field(default="", description="Free-text search")
    view: str = Field(default="all", description="View filter")
    limit: int = Field(default=30, ge=1, description="Maximum number of posts")
    tags: List[str] = Field(default_factory=list, description="Tag filter")


class FeedResponse(BaseModel):
    """Rendered feed, ready to be written by the HTTP layer"""

    body: bytes
    content_type: str = ATOM_CONTENT_TYPE
    status_code: int = 200


PostSearcher = Callable[[SearchPosts], List[Post]]


class FeedService:
    """
    Service producing a tenant's global Atom feed.

    Example:
        service = FeedService(search_posts=repository.search)
        response = service.global_feed(tenant, query="dark mode", tags=["ui"])
        return Response(content=response.body, media_type=response.content_type)
    """

    def __init__(self, search_posts: PostSearcher, config: Optional[FeedConfig] = None):
        """
        Initialize feed service.

        Args:
            search_posts: Collaborator returning posts in presentation order
            config: Feed configuration (defaults to global settings)
        """
        self.search_posts = search_posts
        self.config = config or settings.feed

    def build_query(self, query: str = "", tags: Optional[List[str]] = None) -> SearchPosts:
        """Build the search query for the global feed"""
        return SearchPosts(
            query=query,
            view=self.config.search_view,
            limit=self.config.search_limit,
            tags=tags or [],
        )

    def fetch_posts(self, search: SearchPosts) -> List[Post]:
        """
        Run the search collaborator.

        Raises:
            UpstreamQueryError: If the collaborator fails
        """
        try:
            return list(self.search_posts(search))
        except UpstreamQueryError:
            raise
        except Exception as e:
            logger.error(f"Post search failed for {search!r}: {e}")
            raise UpstreamQueryError(f"Post search failed: {e}", cause=e) from e

    def global_feed(
        self,
        tenant: TenantInfo,
        base_url: Optional[str] = None,
        query: str = "",
        tags: Optional[List[str]] = None
    ) -> FeedResponse:
        """
        Render the global feed for a tenant.

        Args:
            tenant: Tenant resolved for the request
            base_url: Base URL for ids and links (defaults to tenant.base_url)
            query: Free-text search
            tags: Tag filter

        Returns:
            FeedResponse with the Atom document

        Raises:
            UpstreamQueryError: If the post search fails
            SerializationError: If the document cannot be rendered
        """
        posts = self.fetch_posts(self.build_query(query=query, tags=tags))
        feed = build_feed(tenant, posts, base_url=base_url)

        body = serialize_feed(feed, pretty=self.config.pretty, indent=self.config.indent)

        logger.info(f"Rendered feed for {feed.id}: {len(feed.entries)} entries, {len(body)} bytes")
        return FeedResponse(body=body)
