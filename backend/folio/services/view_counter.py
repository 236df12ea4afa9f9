"""View Counter: unauthenticated, best-effort blog view increments.

Invariants:
    - One call = one increment, no de-duplication; reloads inflate the count
    - The increment is a single UPDATE ... SET views = views + 1: concurrent calls never lose updates
    - Looks up by slug regardless of publish status
    - An unknown slug is a no-op, not an error
"""

import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.models.blog import Blog

logger = logging.getLogger(__name__)


class ViewCounter:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def increment(self, slug: str, by: int = 1) -> bool:
        """Atomically add `by` to the blog's views. Returns False if no blog matched."""
        result = await self.db.execute(
            update(Blog)
            .where(Blog.slug == slug)
            .values(views=Blog.views + by)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        if result.rowcount == 0:
            logger.warning("View increment for unknown slug", extra={"slug": slug})
            return False
        return True
