"""Health probes: liveness always up, readiness follows the database."""

import folio.infrastructure.database as db_module
from folio import __version__


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "service": "folio-api", "version": __version__}


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    body = res.json()
    assert body["checks"] == {"database": "healthy"}
    assert body["backend"] == "sqlite"


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["checks"] == {"database": "unavailable"}


async def test_readiness_when_database_check_fails(client, monkeypatch):
    async def unhealthy():
        return False

    monkeypatch.setattr(db_module.db_manager, "health_check", unhealthy)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
