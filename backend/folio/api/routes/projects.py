"""Project Routes: public listing, admin CRUD, active toggle and reorder.

Invariants:
    - GET routes are public; every other route is gated by require_admin
    - List is unpaginated and always in display order (ascending order value)
    - Reorder at an edge answers 200 with {moved: false, reason, projects}
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from folio.api.dependencies import require_admin
from folio.core.domain_types import ProjectCategory
from folio.infrastructure.database import get_db
from folio.schemas.project import (
    ProjectCreate, ProjectResponse, ProjectUpdate,
    ReorderBoundaryResponse, ReorderRequest,
)
from folio.services.project_service import ProjectService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/projects", tags=["projects"])

admin_only = [Depends(require_admin)]


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    active: bool | None = Query(None),
    featured: bool | None = Query(None),
    category: ProjectCategory | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """All projects in display order."""
    return await ProjectService(db).list_projects(
        active=active, featured=featured, category=category,
    )


@router.post(
    "", response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED, dependencies=admin_only,
)
async def create_project(body: ProjectCreate, db: AsyncSession = Depends(get_db)):
    return await ProjectService(db).create(body)


@router.post("/reorder", dependencies=admin_only)
async def reorder_project(body: ReorderRequest, db: AsyncSession = Depends(get_db)):
    """Swap a project with its neighbour. Returns the re-sorted list."""
    projects, boundary = await ProjectService(db).reorder(
        body.project_id, body.direction,
    )
    items = [ProjectResponse.model_validate(p) for p in projects]
    if boundary is not None:
        return ReorderBoundaryResponse(reason=boundary.reason, projects=items)
    return items


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    return await ProjectService(db).get(project_id)


@router.put(
    "/{project_id}", response_model=ProjectResponse, dependencies=admin_only,
)
async def update_project(
    project_id: UUID, body: ProjectUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update: omitted fields keep their values."""
    return await ProjectService(db).update(project_id, body)


@router.post(
    "/{project_id}/toggle-active",
    response_model=ProjectResponse, dependencies=admin_only,
)
async def toggle_project_active(
    project_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await ProjectService(db).toggle_active(project_id)


@router.delete("/{project_id}", dependencies=admin_only)
async def delete_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    await ProjectService(db).delete(project_id)
    return {"message": "Project deleted successfully"}
