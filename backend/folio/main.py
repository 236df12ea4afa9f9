"""Folio API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortfolioError to structured JSON responses
    - CORS configured from settings, with credentials allowed (the admin cookie)
    - Settings are read at import: a missing required value stops the process here

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Database pool acquired once per process, disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio import __version__
from folio.api.error_handlers import register_error_handlers
from folio.api.routes import auth, blogs, health, projects, testimonials
from folio.config import get_settings
from folio.infrastructure.database import close_db, init_db
from folio.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Folio API started")
    yield
    await close_db()
    logger.info("Folio API shutting down")


app = FastAPI(title="Folio API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(blogs.router)
app.include_router(testimonials.router)

register_error_handlers(app)
