"""Auth Routes: login, logout and session probe for the single admin.

Invariants:
    - Successful login sets an HTTP-only cookie holding the signed token; the token
      is never returned in the body
    - Logout clears the cookie; the token itself stays valid until expiry (stateless)
    - GET /session never fails on a bad token: it reports authenticated=false
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response

from folio.api.dependencies import MaybeAdmin, get_auth_gate
from folio.schemas.auth import LoginRequest, SessionResponse, SessionUser
from folio.services.auth_gate import AuthGate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

Gate = Annotated[AuthGate, Depends(get_auth_gate)]


@router.post("/login")
async def login(body: LoginRequest, response: Response, gate: Gate):
    """Verify admin credentials and set the session cookie."""
    credential = gate.login(body.email, body.password)
    response.set_cookie(
        key=gate.settings.auth_cookie_name,
        value=credential.token,
        max_age=credential.max_age_seconds,
        httponly=True,
        secure=gate.settings.auth_cookie_secure,
        samesite="lax",
        path="/",
    )
    return {
        "success": True,
        "user": {"email": credential.email},
        "expiresAt": credential.expires_at.isoformat(),
    }


@router.post("/logout")
async def logout(response: Response, gate: Gate):
    response.delete_cookie(
        key=gate.settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=gate.settings.auth_cookie_secure,
        samesite="lax",
    )
    return {"success": True}


@router.get("/session", response_model=SessionResponse)
async def session(admin: MaybeAdmin):
    if admin is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(
        authenticated=True, user=SessionUser(email=admin["email"]),
    )
