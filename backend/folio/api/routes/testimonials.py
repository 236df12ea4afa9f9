"""Testimonial Routes: public reads, admin CRUD."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from folio.api.dependencies import require_admin
from folio.infrastructure.database import get_db
from folio.schemas.testimonial import (
    TestimonialCreate, TestimonialResponse, TestimonialUpdate,
)
from folio.services.testimonial_service import TestimonialService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/testimonials", tags=["testimonials"])

admin_only = [Depends(require_admin)]


@router.get("", response_model=list[TestimonialResponse])
async def list_testimonials(
    active: bool | None = Query(None), db: AsyncSession = Depends(get_db),
):
    return await TestimonialService(db).list_testimonials(active)


@router.post(
    "", response_model=TestimonialResponse,
    status_code=status.HTTP_201_CREATED, dependencies=admin_only,
)
async def create_testimonial(
    body: TestimonialCreate, db: AsyncSession = Depends(get_db),
):
    return await TestimonialService(db).create(body)


@router.get("/{testimonial_id}", response_model=TestimonialResponse)
async def get_testimonial(testimonial_id: UUID, db: AsyncSession = Depends(get_db)):
    return await TestimonialService(db).get(testimonial_id)


@router.put(
    "/{testimonial_id}",
    response_model=TestimonialResponse, dependencies=admin_only,
)
async def update_testimonial(
    testimonial_id: UUID,
    body: TestimonialUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await TestimonialService(db).update(testimonial_id, body)


@router.delete("/{testimonial_id}", dependencies=admin_only)
async def delete_testimonial(
    testimonial_id: UUID, db: AsyncSession = Depends(get_db),
):
    await TestimonialService(db).delete(testimonial_id)
    return {"message": "Testimonial deleted successfully"}
