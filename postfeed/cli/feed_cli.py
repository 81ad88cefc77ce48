"""
Command-line interface for rendering a tenant feed.

Reads a JSON export with a tenant and its posts and writes the Atom
document, for inspecting feed output without the web stack.

Usage:
    python -m postfeed.cli.feed_cli export.json
    python -m postfeed.cli.feed_cli export.json --base-url https://acme.example --output feed.atom
    python -m postfeed.cli.feed_cli --help

Input format:
    {
        "tenant": {"name": "Acme", "welcome_message": "", "base_url": "https://acme.example"},
        "posts": [
            {"id": 1, "title": "Idea A", "description": "...",
             "created_at": "2023-01-01T00:00:00Z", "user": {"name": "Alice"},
             "response": null}
        ]
    }
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..config import FeedConfig, Settings, settings
from ..exceptions import FeedError
from ..models.post import Post, TenantInfo
from ..services.feed_service import FeedService, SearchPosts

logger = logging.getLogger(__name__)


class FeedExport(BaseModel):
    """JSON export consumed by the CLI"""

    tenant: TenantInfo
    posts: List[Post] = Field(default_factory=list)


def load_export(path: Path) -> FeedExport:
    """Load and validate a JSON export"""
    return FeedExport.model_validate_json(path.read_text(encoding="utf-8"))


def render_export(
    export: FeedExport,
    base_url: Optional[str] = None,
    config: Optional[FeedConfig] = None
) -> bytes:
    """
    Render an export through the feed service.

    The export's post list stands in for the search collaborator; the
    configured limit still applies.
    """
    def search_export(search: SearchPosts) -> List[Post]:
        return export.posts[:search.limit]

    service = FeedService(search_posts=search_export, config=config or settings.feed)
    return service.global_feed(export.tenant, base_url=base_url).body


def parse_args(argv: Optional[List[str]] = None, version: str = "") -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a tenant's Atom feed from a JSON export"
    )
    parser.add_argument("input", type=Path, help="JSON export with tenant and posts")
    parser.add_argument("--base-url", default=None, help="Override the tenant base URL")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Write to file instead of stdout")
    parser.add_argument("--compact", action="store_true", help="Disable indentation")
    parser.add_argument("--version", action="version", version=version)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    # Read .env from the working directory at run time
    run_settings = Settings()
    app = run_settings.app
    logging.basicConfig(
        level=getattr(logging, app.log_level.upper(), logging.INFO),
        format=app.log_format
    )

    args = parse_args(argv, version=f"{app.app_name} {app.app_version}")
    logger.info(f"{app.app_name} {app.app_version}: rendering {args.input}")

    feed_config = run_settings.feed
    if args.compact:
        feed_config = feed_config.model_copy(update={"pretty": False})

    try:
        export = load_export(args.input)
    except (OSError, ValidationError) as e:
        logger.error(f"Could not read export {args.input}: {e}")
        return 1

    try:
        body = render_export(export, base_url=args.base_url, config=feed_config)
    except FeedError as e:
        logger.error(f"Feed generation failed: {e}")
        return 1

    if args.output:
        args.output.write_bytes(body)
        logger.info(f"Wrote {len(body)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(body)
        sys.stdout.buffer.write(b"\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
