"""Service test fixtures: async DB + FastAPI test clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - admin_client carries a freshly signed admin cookie; client carries none

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection, so
      all sessions see the same database
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import folio.infrastructure.database as db_module
import folio.models  # noqa: F401
from folio.config import get_settings
from folio.db.base import Base
from folio.infrastructure.database import DatabaseSessionManager, get_db
from folio.main import app
from folio.services.auth_gate import AuthGate


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def admin_cookies() -> dict:
    settings = get_settings()
    credential = AuthGate(settings).issue(settings.admin_email)
    return {settings.auth_cookie_name: credential.token}


@pytest.fixture
async def override_db(test_engine, test_session_factory):
    """Route get_db and db_manager at the test engine."""
    async def override_get_db():
        async with db_module.db_manager.session() as session:
            yield session

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.database_url = "sqlite+aiosqlite:///:memory:"
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    app.dependency_overrides[get_db] = override_get_db

    yield

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(override_db):
    """Anonymous FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def admin_client(override_db, admin_cookies):
    """FastAPI test client holding a valid admin cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        cookies=admin_cookies,
    ) as c:
        yield c
