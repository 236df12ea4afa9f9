"""Project Schemas: create, partial update, reorder and response shapes.

Invariants:
    - ProjectCreate requires title, description, category
    - ProjectUpdate is partial: omitted fields keep their stored value
    - order is never accepted on create (assigned as max + 1)
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from folio.core.domain_types import ProjectCategory, ReorderDirection
from folio.schemas.base import (
    CamelModel, OrmResponse, clean_tags, reject_explicit_nulls, strip_required,
)


class ProjectCreate(CamelModel):
    """New project submitted by the admin."""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    category: ProjectCategory
    image: str | None = None
    tags: list[str] = Field(default_factory=list)
    live_url: str | None = None
    github_url: str | None = None
    detailed_content: str | None = None
    carousels: list[str] = Field(default_factory=list)
    video_url: str | None = None
    is_detailed_page: bool = False
    is_private: bool = False
    is_active: bool = True
    featured: bool = False

    strip_text = field_validator("title", "description")(strip_required)
    tidy_tags = field_validator("tags")(clean_tags)


class ProjectUpdate(CamelModel):
    """Partial project patch."""
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    category: ProjectCategory | None = None
    image: str | None = None
    tags: list[str] | None = None
    live_url: str | None = None
    github_url: str | None = None
    detailed_content: str | None = None
    carousels: list[str] | None = None
    video_url: str | None = None
    is_detailed_page: bool | None = None
    is_private: bool | None = None
    is_active: bool | None = None
    featured: bool | None = None
    order: int | None = Field(None, ge=0)

    strip_text = field_validator("title", "description")(strip_required)
    tidy_tags = field_validator("tags")(clean_tags)

    @model_validator(mode="after")
    def forbid_nulling_required(self):
        reject_explicit_nulls(self, (
            "title", "description", "category", "tags", "carousels",
            "is_detailed_page", "is_private", "is_active", "featured", "order",
        ))
        return self


class ReorderRequest(CamelModel):
    """Move one project a single step up or down."""
    project_id: UUID
    direction: ReorderDirection


class ProjectResponse(OrmResponse):
    id: UUID
    title: str
    description: str
    category: ProjectCategory
    image: str | None
    tags: list[str]
    live_url: str | None
    github_url: str | None
    detailed_content: str | None
    carousels: list[str]
    video_url: str | None
    is_detailed_page: bool
    is_private: bool
    is_active: bool
    featured: bool
    order: int
    created_at: datetime
    updated_at: datetime


class ReorderBoundaryResponse(CamelModel):
    """Returned with HTTP 200 when the project already sits at the requested edge."""
    moved: bool = False
    reason: str
    projects: list[ProjectResponse]
