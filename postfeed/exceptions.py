"""
Error types raised by the feed core.

Responsibility: Distinguish upstream query failures from rendering failures
"""

from typing import Optional


class FeedError(Exception):
    """Base class for all feed errors"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UpstreamQueryError(FeedError):
    """Raised when the post search collaborator fails"""


class SerializationError(FeedError):
    """Raised when a feed document cannot be rendered to XML"""


class FeedParseError(FeedError):
    """Raised when XML input is not a well-formed Atom feed"""
