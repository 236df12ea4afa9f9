"""Testimonial Service: plain CRUD, newest first."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.errors import ResourceNotFoundError
from folio.models.testimonial import Testimonial
from folio.schemas.testimonial import TestimonialCreate, TestimonialUpdate

logger = logging.getLogger(__name__)


class TestimonialService:
    """Testimonial persistence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_testimonials(self, active: bool | None = None) -> list[Testimonial]:
        query = select(Testimonial).order_by(Testimonial.created_at.desc())
        if active is not None:
            query = query.where(Testimonial.is_active.is_(active))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, testimonial_id: UUID) -> Testimonial:
        testimonial = await self.db.get(Testimonial, testimonial_id)
        if not testimonial:
            raise ResourceNotFoundError("Testimonial", str(testimonial_id))
        return testimonial

    async def create(self, body: TestimonialCreate) -> Testimonial:
        testimonial = Testimonial(**body.model_dump())
        self.db.add(testimonial)
        await self.db.commit()
        await self.db.refresh(testimonial)
        logger.info(
            "Testimonial created",
            extra={"resource": "Testimonial", "resource_id": str(testimonial.id)},
        )
        return testimonial

    async def update(self, testimonial_id: UUID, body: TestimonialUpdate) -> Testimonial:
        testimonial = await self.get(testimonial_id)
        for name, value in body.model_dump(exclude_unset=True).items():
            setattr(testimonial, name, value)
        await self.db.commit()
        await self.db.refresh(testimonial)
        logger.info(
            "Testimonial updated",
            extra={"resource": "Testimonial", "resource_id": str(testimonial_id)},
        )
        return testimonial

    async def delete(self, testimonial_id: UUID) -> None:
        testimonial = await self.get(testimonial_id)
        await self.db.delete(testimonial)
        await self.db.commit()
        logger.info(
            "Testimonial deleted",
            extra={"resource": "Testimonial", "resource_id": str(testimonial_id)},
        )
