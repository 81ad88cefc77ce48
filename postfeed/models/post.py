"""
Post and tenant domain models.

Inputs handed to the feed core by its collaborators: the ordered post list
from the search query and the tenant resolved for the current request.

Responsibility: Read-only input records for feed synthesis
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class PostUser(BaseModel):
    """Author of a post"""

    name: str = Field(description="Display name of the author")


class PostResponse(BaseModel):
    """Official response attached to a post"""

    responded_at: datetime = Field(description="When the response was given")


class Post(BaseModel):
    """
    A post as returned by the search query.

    Natural key: (tenant, id)
    """

    id: int = Field(description="Post number, unique within the tenant")
    title: str = Field(description="Post title")
    description: str = Field(
        default="",
        description="Post body, may contain markup"
    )
    created_at: datetime = Field(description="Creation timestamp")
    user: PostUser = Field(description="Post author")
    response: Optional[PostResponse] = Field(
        default=None,
        description="Response, if the post has been answered"
    )


class TenantInfo(BaseModel):
    """Tenant whose posts and branding populate the feed"""

    name: str = Field(description="Tenant display name")
    welcome_message: str = Field(
        default="",
        description="Welcome message shown as feed subtitle"
    )
    base_url: str = Field(description="Absolute base URL, no trailing slash")
