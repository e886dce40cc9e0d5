"""Schemas for the posts endpoints (/api/posts)."""

from datetime import datetime

from pydantic import BaseModel, Field

from postboard.services.identifiers import PostId, UserId


class Post(BaseModel):
    """A post written by a user. `published_at` is None while unpublished."""

    id: PostId
    author_id: UserId = Field(alias="authorId")
    title: str = Field(min_length=1)
    content: str
    tags: list[str] = Field(default_factory=list)
    published_at: datetime | None = Field(alias="publishedAt", default=None)

    model_config = {"populate_by_name": True}


class PostCreate(BaseModel):
    """Request body for POST /api/posts."""

    author_id: str = Field(alias="authorId")
    title: str = Field(min_length=1)
    content: str
    tags: list[str] = Field(default_factory=list)
    publish: bool = False

    model_config = {"populate_by_name": True}
