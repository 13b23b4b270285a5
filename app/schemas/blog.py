"""Schemas for blog posts."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import JSONList, PartialUpdate


class BlogPostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    excerpt: str | None = None
    content: str
    featured_image: str | None = None
    author_id: int | None = None
    author_name: str | None = None
    category: str | None = None
    tags: JSONList = Field(default_factory=list)
    is_published: bool = False
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BlogPostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=512)
    slug: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: str | None = None
    content: str = Field(..., min_length=1)
    featured_image: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False


class BlogPostUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"title", "slug", "content", "is_published"})

    title: str | None = Field(default=None, min_length=1, max_length=512)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: str | None = None
    content: str | None = Field(default=None, min_length=1)
    featured_image: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    is_published: bool | None = None
