"""Project Service: CRUD, active toggle and the IO half of the Ordering Engine.

Invariants:
    - New projects get order = max(existing) + 1, or 0 for the first one
    - reorder swaps the order values of two adjacent rows inside ONE transaction;
      both UPDATEs are guarded by the value read before the swap, so an interleaved
      write is detected (ConcurrencyError) and rolled back instead of half-applied
    - Boundary moves write nothing (beyond a collision compaction) and return the current list
    - delete compacts the remaining order values to 0..n-1 in the same transaction
    - reorder over colliding order values first compacts to 0..n-1, in the same
      transaction as the swap

Design Decisions:
    - Every call reloads from the database: no cached list between requests
    - "Assign next order" is not locked: two concurrent creates may collide on the
      same value (accepted, single-admin system; a collision only makes the pair's
      relative position arbitrary until the next reorder compacts them)
"""

import logging
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.domain_types import ProjectCategory, ReorderDirection
from folio.core.errors import ConcurrencyError, ResourceNotFoundError
from folio.core.ordering import (
    OrderSlot, ReorderBoundary, compact_orders, has_order_collisions, next_order,
    plan_reorder,
)
from folio.models.project import Project
from folio.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectService:
    """Project persistence plus adjacent-swap reordering."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ───────────────────────────────────────────────────

    async def list_projects(
        self,
        active: bool | None = None,
        featured: bool | None = None,
        category: ProjectCategory | None = None,
    ) -> list[Project]:
        """All projects in display order, optionally filtered."""
        query = select(Project).order_by(Project.order.asc(), Project.created_at.asc())
        if active is not None:
            query = query.where(Project.is_active.is_(active))
        if featured is not None:
            query = query.where(Project.featured.is_(featured))
        if category is not None:
            query = query.where(Project.category == category.value)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, project_id: UUID) -> Project:
        project = await self.db.get(Project, project_id)
        if not project:
            raise ResourceNotFoundError("Project", str(project_id))
        return project

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, body: ProjectCreate) -> Project:
        result = await self.db.execute(select(func.max(Project.order)))
        data = body.model_dump()
        data["category"] = body.category.value
        project = Project(**data, order=next_order(result.scalar_one_or_none()))
        self.db.add(project)
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(
            f"Project created at order {project.order}",
            extra={"resource": "Project", "resource_id": str(project.id)},
        )
        return project

    async def update(self, project_id: UUID, body: ProjectUpdate) -> Project:
        """Apply only the supplied fields."""
        project = await self.get(project_id)
        changes = body.model_dump(exclude_unset=True)
        if "category" in changes:
            changes["category"] = body.category.value
        for name, value in changes.items():
            setattr(project, name, value)
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(
            f"Project updated: {sorted(changes)}",
            extra={"resource": "Project", "resource_id": str(project_id)},
        )
        return project

    async def toggle_active(self, project_id: UUID) -> Project:
        project = await self.get(project_id)
        project.is_active = not project.is_active
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(
            f"Project active flag set to {project.is_active}",
            extra={"resource": "Project", "resource_id": str(project_id)},
        )
        return project

    async def delete(self, project_id: UUID) -> None:
        """Hard delete, then close the gap left in the order sequence."""
        project = await self.get(project_id)
        await self.db.delete(project)
        await self.db.flush()

        await self._compact(await self._load_slots())
        await self.db.commit()
        logger.info(
            "Project deleted",
            extra={"resource": "Project", "resource_id": str(project_id)},
        )

    # ─── Ordering ────────────────────────────────────────────────

    async def reorder(
        self, project_id: UUID, direction: ReorderDirection,
    ) -> tuple[list[Project], ReorderBoundary | None]:
        """Move a project one step. Returns (fresh sorted list, boundary or None)."""
        slots = await self._load_slots()
        if has_order_collisions(slots):
            logger.warning(
                "Colliding project order values, compacting before reorder",
                extra={"resource_id": str(project_id), "direction": direction.value},
            )
            slots = await self._compact(slots)
        plan = plan_reorder(slots, project_id, direction)

        if isinstance(plan, ReorderBoundary):
            await self.db.commit()
            logger.info(
                plan.reason,
                extra={"resource_id": str(project_id), "direction": direction.value},
            )
            return await self.list_projects(), plan

        # Target first, then source: both guarded by the value read above
        await self._guarded_set_order(plan.target, plan.new_target_order)
        await self._guarded_set_order(plan.source, plan.new_source_order)
        await self.db.commit()

        logger.info(
            f"Project moved {direction.value}: order {plan.source.order} -> {plan.new_source_order}",
            extra={"resource_id": str(project_id), "direction": direction.value},
        )
        # Swapped rows were updated in SQL: drop stale identity-map copies
        self.db.expunge_all()
        return await self.list_projects(), None

    async def _load_slots(self) -> list[OrderSlot]:
        result = await self.db.execute(
            select(Project.id, Project.order).order_by(
                Project.order.asc(), Project.created_at.asc(),
            ),
        )
        return [OrderSlot(id=row.id, order=row.order) for row in result.all()]

    async def _compact(self, slots: list[OrderSlot]) -> list[OrderSlot]:
        """Renumber to 0..n-1 keeping the sequence. Leaves the transaction open."""
        for slot_id, position in compact_orders(slots).items():
            await self.db.execute(
                update(Project).where(Project.id == slot_id).values(order=position),
            )
        return [OrderSlot(id=s.id, order=i) for i, s in enumerate(slots)]

    async def _guarded_set_order(self, slot: OrderSlot, new_order: int) -> None:
        result = await self.db.execute(
            update(Project)
            .where(Project.id == slot.id, Project.order == slot.order)
            .values(order=new_order),
        )
        if result.rowcount != 1:
            await self.db.rollback()
            raise ConcurrencyError(
                "Project order changed during reorder; reload and retry",
            )
