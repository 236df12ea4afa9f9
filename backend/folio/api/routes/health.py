"""Health Probes: process liveness and database readiness.

Invariants:
    - GET /health/ never touches storage; 200 while the process serves requests
    - GET /health/ready is 503 until the database answers SELECT 1, including
      before the lifespan has acquired the pool
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import folio.infrastructure.database as database
from folio import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": "folio-api", "version": __version__}


@router.get("/ready")
async def readiness():
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unavailable"}},
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "backend": manager.engine.dialect.name,
    }
