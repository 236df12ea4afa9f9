"""Domain Types: enums and identity types shared by schemas, models and services.

Invariants:
    - ProjectId, BlogId, TestimonialId wrap UUIDs
    - Every closed set of values (category, direction, publish status) is an Enum

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", UUID)
BlogId = NewType("BlogId", UUID)
TestimonialId = NewType("TestimonialId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ProjectCategory(str, Enum):
    """Portfolio project categories."""
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    MOBILE = "mobile"
    AI = "ai"


class ReorderDirection(str, Enum):
    """Adjacent-swap direction. UP moves towards the lowest order value."""
    UP = "up"
    DOWN = "down"


class PublishStatus(str, Enum):
    """Blog list status filter: maps to the is_published column."""
    PUBLISHED = "published"
    DRAFT = "draft"
