"""Blog Routes: public reads by slug, view counter, admin management.

Invariants:
    - Public list and slug reads only ever return published blogs; admins see all
    - POST /by-slug/{slug}/views is unauthenticated and always answers 200
    - /manage/{id} routes are admin-only and see unpublished drafts
    - Public slug reads degrade storage failures to 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.api.dependencies import MaybeAdmin, require_admin
from folio.core.domain_types import PublishStatus
from folio.core.errors import ResourceNotFoundError
from folio.infrastructure.database import get_db
from folio.schemas.blog import (
    BlogCreate, BlogListResponse, BlogResponse, BlogUpdate,
)
from folio.services.blog_service import BlogService
from folio.services.view_counter import ViewCounter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/blogs", tags=["blogs"])

admin_only = [Depends(require_admin)]


@router.get("", response_model=BlogListResponse)
async def list_blogs(
    admin: MaybeAdmin,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    tag: str | None = Query(None, max_length=100),
    search: str | None = Query(None, max_length=200),
    status_filter: PublishStatus | None = Query(None, alias="status"),
    featured: bool | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Paginated blogs, newest first. Anonymous callers get published only."""
    blogs, pagination = await BlogService(db).list_blogs(
        is_admin=admin is not None,
        page=page, limit=limit, tag=tag, search=search,
        status=status_filter, featured=featured,
    )
    return {"blogs": blogs, "pagination": pagination}


@router.post(
    "", response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED, dependencies=admin_only,
)
async def create_blog(body: BlogCreate, db: AsyncSession = Depends(get_db)):
    return await BlogService(db).create(body)


@router.get("/featured", response_model=list[BlogResponse])
async def featured_blogs(
    limit: int = Query(3, ge=1, le=20), db: AsyncSession = Depends(get_db),
):
    return await BlogService(db).list_featured(limit)


@router.get("/tags", response_model=list[str])
async def blog_tags(db: AsyncSession = Depends(get_db)):
    """Distinct tags across published blogs."""
    return await BlogService(db).list_tags()


@router.get("/by-slug/{slug}", response_model=BlogResponse)
async def get_blog_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    try:
        return await BlogService(db).get_published_by_slug(slug)
    except SQLAlchemyError as e:
        logger.error(f"Blog lookup failed: {e}", extra={"slug": slug})
        raise ResourceNotFoundError("Blog", slug)


@router.post("/by-slug/{slug}/views")
async def increment_blog_views(slug: str, db: AsyncSession = Depends(get_db)):
    await ViewCounter(db).increment(slug)
    return {"message": "View count incremented"}


@router.get(
    "/manage/{blog_id}", response_model=BlogResponse, dependencies=admin_only,
)
async def get_blog(blog_id: UUID, db: AsyncSession = Depends(get_db)):
    return await BlogService(db).get(blog_id)


@router.put(
    "/manage/{blog_id}", response_model=BlogResponse, dependencies=admin_only,
)
async def update_blog(
    blog_id: UUID, body: BlogUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update; a new content body recomputes readingTime."""
    return await BlogService(db).update(blog_id, body)


@router.post(
    "/manage/{blog_id}/publish",
    response_model=BlogResponse, dependencies=admin_only,
)
async def toggle_blog_published(blog_id: UUID, db: AsyncSession = Depends(get_db)):
    return await BlogService(db).toggle_published(blog_id)


@router.post(
    "/manage/{blog_id}/feature",
    response_model=BlogResponse, dependencies=admin_only,
)
async def toggle_blog_featured(blog_id: UUID, db: AsyncSession = Depends(get_db)):
    return await BlogService(db).toggle_featured(blog_id)


@router.delete("/manage/{blog_id}", dependencies=admin_only)
async def delete_blog(blog_id: UUID, db: AsyncSession = Depends(get_db)):
    await BlogService(db).delete(blog_id)
    return {"message": "Blog deleted successfully"}
