"""Blog Service: CRUD, visibility-filtered listing, publish/feature toggles and tags.

Invariants:
    - slug = explicit slug if supplied, else derive_slug(title); never auto-suffixed
    - A slug unique-constraint violation surfaces as DuplicateSlugError; nothing is persisted
    - reading_time is recomputed whenever content is written, and only then
    - Anonymous callers only ever see published blogs; the caller's auth state decides,
      never a query parameter

Design Decisions:
    - Slug pre-check plus constraint: the pre-check gives a clean error, the
      constraint catches the race between two writers
    - Tag filter is a JSON membership test on the decoded array (JSONB @> on Postgres,
      json_each on SQLite), never a match on the encoded text
    - Search matches the title literally: LIKE wildcards in the query are escaped
"""

import logging
import math
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import cast, func, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.derive_fields import derive_reading_time, derive_slug
from folio.core.domain_types import PublishStatus
from folio.core.errors import (
    ContentValidationError, DuplicateSlugError, ResourceNotFoundError,
)
from folio.core.tags import LIKE_ESCAPE, collect_distinct_tags, contains_pattern
from folio.models.blog import Blog
from folio.schemas.blog import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)


class BlogService:
    """Blog persistence with derived slug and reading time."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ───────────────────────────────────────────────────

    async def list_blogs(
        self,
        *,
        is_admin: bool,
        page: int = 1,
        limit: int = 10,
        tag: str | None = None,
        search: str | None = None,
        status: PublishStatus | None = None,
        featured: bool | None = None,
    ) -> tuple[list[Blog], dict]:
        """Paginated blogs, newest first. Returns (blogs, pagination)."""
        query = select(Blog)
        if not is_admin:
            status = PublishStatus.PUBLISHED
        if status is not None:
            query = query.where(
                Blog.is_published.is_(status == PublishStatus.PUBLISHED),
            )
        if tag:
            query = query.where(self._has_tag(tag))
        if search:
            query = query.where(
                Blog.title.ilike(contains_pattern(search), escape=LIKE_ESCAPE),
            )
        if featured:
            query = query.where(Blog.featured.is_(True))

        total = (
            await self.db.execute(select(func.count()).select_from(query.subquery()))
        ).scalar_one()
        result = await self.db.execute(
            query.order_by(Blog.published_at.desc(), Blog.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit),
        )
        pagination = {
            "total": total,
            "pages": math.ceil(total / limit),
            "page": page,
            "limit": limit,
        }
        return list(result.scalars().all()), pagination

    async def list_featured(self, limit: int = 3) -> list[Blog]:
        result = await self.db.execute(
            select(Blog)
            .where(Blog.is_published.is_(True), Blog.featured.is_(True))
            .order_by(Blog.published_at.desc())
            .limit(limit),
        )
        return list(result.scalars().all())

    async def get(self, blog_id: UUID) -> Blog:
        blog = await self.db.get(Blog, blog_id)
        if not blog:
            raise ResourceNotFoundError("Blog", str(blog_id))
        return blog

    async def get_published_by_slug(self, slug: str) -> Blog:
        result = await self.db.execute(
            select(Blog).where(Blog.slug == slug, Blog.is_published.is_(True)),
        )
        blog = result.scalar_one_or_none()
        if not blog:
            raise ResourceNotFoundError("Blog", slug)
        return blog

    async def list_tags(self) -> list[str]:
        """Distinct tags across published blogs, sorted."""
        result = await self.db.execute(
            select(Blog.tags).where(Blog.is_published.is_(True)),
        )
        return collect_distinct_tags(result.scalars().all())

    def _has_tag(self, tag: str):
        """Dialect-specific predicate: tag is an element of blogs.tags."""
        if self.db.bind.dialect.name == "postgresql":
            return cast(Blog.tags, JSONB).contains([tag])
        elements = func.json_each(Blog.tags).table_valued("value")
        return select(elements.c.value).where(elements.c.value == tag).exists()

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, body: BlogCreate) -> Blog:
        slug = body.slug or derive_slug(body.title)
        if not slug:
            raise ContentValidationError(
                "Title has no letters or digits to build a slug from; supply a slug",
                field="slug",
            )
        await self._ensure_slug_free(slug)

        data = body.model_dump(exclude={"slug"})
        blog = Blog(
            **data,
            slug=slug,
            reading_time=derive_reading_time(body.content),
            views=0,
        )
        self.db.add(blog)
        await self._commit_or_duplicate(slug)
        await self.db.refresh(blog)
        logger.info(
            "Blog created",
            extra={"resource": "Blog", "resource_id": str(blog.id), "slug": slug},
        )
        return blog

    async def update(self, blog_id: UUID, body: BlogUpdate) -> Blog:
        """Apply only the supplied fields; recompute reading time on content change."""
        blog = await self.get(blog_id)
        changes = body.model_dump(exclude_unset=True)

        new_slug = changes.get("slug")
        if new_slug is not None and new_slug != blog.slug:
            await self._ensure_slug_free(new_slug)
        if "content" in changes:
            changes["reading_time"] = derive_reading_time(changes["content"])
        if changes.get("is_published") and not blog.is_published:
            changes["published_at"] = datetime.now(timezone.utc)

        for name, value in changes.items():
            setattr(blog, name, value)
        await self._commit_or_duplicate(new_slug or blog.slug)
        await self.db.refresh(blog)
        logger.info(
            f"Blog updated: {sorted(changes)}",
            extra={"resource": "Blog", "resource_id": str(blog_id)},
        )
        return blog

    async def toggle_published(self, blog_id: UUID) -> Blog:
        blog = await self.get(blog_id)
        blog.is_published = not blog.is_published
        if blog.is_published:
            blog.published_at = datetime.now(timezone.utc)
        await self.db.commit()
        await self.db.refresh(blog)
        logger.info(
            f"Blog published flag set to {blog.is_published}",
            extra={"resource": "Blog", "resource_id": str(blog_id)},
        )
        return blog

    async def toggle_featured(self, blog_id: UUID) -> Blog:
        blog = await self.get(blog_id)
        blog.featured = not blog.featured
        await self.db.commit()
        await self.db.refresh(blog)
        logger.info(
            f"Blog featured flag set to {blog.featured}",
            extra={"resource": "Blog", "resource_id": str(blog_id)},
        )
        return blog

    async def delete(self, blog_id: UUID) -> None:
        blog = await self.get(blog_id)
        await self.db.delete(blog)
        await self.db.commit()
        logger.info(
            "Blog deleted",
            extra={"resource": "Blog", "resource_id": str(blog_id)},
        )

    # ─── Slug uniqueness ─────────────────────────────────────────

    async def _ensure_slug_free(self, slug: str) -> None:
        result = await self.db.execute(select(Blog.id).where(Blog.slug == slug))
        if result.first() is not None:
            raise DuplicateSlugError(slug)

    async def _commit_or_duplicate(self, slug: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Slug collision on commit", extra={"slug": slug})
            raise DuplicateSlugError(slug)
