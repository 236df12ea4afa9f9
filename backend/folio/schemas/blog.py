"""Blog Schemas: create, partial update, list envelope and response shapes.

Invariants:
    - BlogCreate requires title, content, excerpt, coverImage, author.name
    - readingTime and views are never accepted from clients (unknown keys are ignored)
    - slug is optional on input; derived from title when absent
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from folio.schemas.base import (
    CamelModel, OrmResponse, clean_tags, reject_explicit_nulls, strip_required,
)

_SLUG_PATTERN = r"^[a-z0-9_]+(?:-[a-z0-9_]+)*$"


class Author(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    image: str | None = None

    strip_text = field_validator("name")(strip_required)


class BlogCreate(CamelModel):
    """New blog post submitted by the admin."""
    title: str = Field(min_length=1, max_length=300)
    slug: str | None = Field(None, max_length=300, pattern=_SLUG_PATTERN)
    content: str = Field(min_length=1)
    excerpt: str = Field(min_length=1)
    cover_image: str = Field(min_length=1)
    author: Author
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    featured: bool = False

    strip_text = field_validator("title", "excerpt", "cover_image")(strip_required)
    tidy_tags = field_validator("tags")(clean_tags)


class BlogUpdate(CamelModel):
    """Partial blog patch. A content change recomputes readingTime."""
    title: str | None = Field(None, min_length=1, max_length=300)
    slug: str | None = Field(None, max_length=300, pattern=_SLUG_PATTERN)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = Field(None, min_length=1)
    cover_image: str | None = Field(None, min_length=1)
    author: Author | None = None
    tags: list[str] | None = None
    is_published: bool | None = None
    featured: bool | None = None

    strip_text = field_validator("title", "excerpt", "cover_image")(strip_required)
    tidy_tags = field_validator("tags")(clean_tags)

    @model_validator(mode="after")
    def forbid_nulling_required(self):
        reject_explicit_nulls(self, (
            "title", "slug", "content", "excerpt", "cover_image", "author",
            "tags", "is_published", "featured",
        ))
        return self


class BlogResponse(OrmResponse):
    id: UUID
    title: str
    slug: str
    content: str
    excerpt: str
    cover_image: str
    author: Author
    tags: list[str]
    is_published: bool
    featured: bool
    reading_time: int
    views: int
    published_at: datetime
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    total: int
    pages: int
    page: int
    limit: int


class BlogListResponse(CamelModel):
    blogs: list[BlogResponse]
    pagination: Pagination
