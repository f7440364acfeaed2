"""
Posts module data models.

Wire names follow the established client contract: ``_id`` for
identifiers and camelCase for everything else.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modules.images.models import ImageRef


class PostCreator(BaseModel):
    """The owning user, as embedded in a post."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str


class Post(BaseModel):
    """
    A feed post.

    ``creator_id`` is fixed at creation. Timestamps are assigned by the
    database.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., alias="_id", description="Post ID")
    title: str
    content: str
    image_url: str = Field(..., description="Public display URL of the image")
    image_key: str = Field(..., description="Storage key of the image")
    creator_id: str = Field(..., description="Owner's user ID")
    creator: Optional[PostCreator] = None
    created_at: datetime
    updated_at: datetime

    @property
    def image(self) -> ImageRef:
        return ImageRef(url=self.image_url, key=self.image_key)

    def to_event_payload(self) -> dict:
        """JSON-ready representation used on the real-time channel."""
        return self.model_dump(mode="json", by_alias=True)


class PostPage(BaseModel):
    """One page of the feed plus the overall post count."""

    items: list[Post] = Field(default_factory=list)
    total_count: int = 0
    page: int = 1
    per_page: int = 2


# -----------------------------------------------------------------------------
# REST response bodies
# -----------------------------------------------------------------------------


class PostListResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Fetched posts successfully."
    posts: list[Post]
    total_items: int


class PostResponse(BaseModel):
    message: str
    post: Post


class CreatePostResponse(BaseModel):
    message: str = "Post created successfully!"
    post: Post
    creator: PostCreator


class DeletePostResponse(BaseModel):
    message: str = "Deleted post."
