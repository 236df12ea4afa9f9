"""ORM Models: SQLAlchemy declarative models for all content entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are independent: no foreign keys between projects, blogs and testimonials

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from folio.models.project import Project  # noqa: F401
from folio.models.blog import Blog  # noqa: F401
from folio.models.testimonial import Testimonial  # noqa: F401
