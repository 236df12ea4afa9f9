"""Auth Routes: cookie-based login, logout and session probe.

Tests:
    - Login sets an HTTP-only admin cookie; bad credentials return 401 and no cookie
    - Session probe reports authenticated state without ever failing
    - Logout clears the cookie
"""

from httpx import ASGITransport, AsyncClient

from folio.config import get_settings
from folio.main import app


async def test_login_sets_http_only_cookie(client):
    settings = get_settings()
    res = await client.post("/api/v1/auth/login", json={
        "email": settings.admin_email, "password": settings.admin_password,
    })
    assert res.status_code == 200
    assert res.json()["user"] == {"email": settings.admin_email}
    set_cookie = res.headers["set-cookie"]
    assert set_cookie.startswith(f"{settings.auth_cookie_name}=")
    assert "HttpOnly" in set_cookie
    assert "Max-Age=86400" in set_cookie
    assert "token" not in res.json()


async def test_login_with_wrong_password_returns_401(client):
    settings = get_settings()
    res = await client.post("/api/v1/auth/login", json={
        "email": settings.admin_email, "password": "nope",
    })
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert "set-cookie" not in res.headers


async def test_login_cookie_unlocks_mutations(client, override_db):
    settings = get_settings()
    res = await client.post("/api/v1/auth/login", json={
        "email": settings.admin_email, "password": settings.admin_password,
    })
    token = res.cookies[settings.auth_cookie_name]

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        cookies={settings.auth_cookie_name: token},
    ) as admin:
        created = await admin.post("/api/v1/projects", json={
            "title": "A", "description": "d", "category": "backend",
        })
    assert created.status_code == 201


async def test_session_anonymous(client):
    res = await client.get("/api/v1/auth/session")
    assert res.status_code == 200
    assert res.json() == {"authenticated": False, "user": None}


async def test_session_with_invalid_cookie_is_anonymous(override_db):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        cookies={get_settings().auth_cookie_name: "forged.token.value"},
    ) as c:
        res = await c.get("/api/v1/auth/session")
    assert res.status_code == 200
    assert res.json()["authenticated"] is False


async def test_session_with_admin_cookie(admin_client):
    res = await admin_client.get("/api/v1/auth/session")
    body = res.json()
    assert body["authenticated"] is True
    assert body["user"]["email"] == get_settings().admin_email


async def test_logout_clears_cookie(admin_client):
    res = await admin_client.post("/api/v1/auth/logout")
    assert res.status_code == 200
    set_cookie = res.headers["set-cookie"]
    assert set_cookie.startswith(f"{get_settings().auth_cookie_name}=")
    assert "Max-Age=0" in set_cookie
