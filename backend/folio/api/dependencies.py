"""Auth Dependencies: cookie-based admin gate for FastAPI routes.

Invariants:
    - require_admin raises UnauthorizedError (401) before the route body runs
    - optional_admin never raises: a bad or missing token means "anonymous"
    - The token is read from the HTTP-only cookie only
"""

from typing import Annotated

from fastapi import Depends, Request

from folio.config import Settings, get_settings
from folio.core.errors import PortfolioError, UnauthorizedError
from folio.services.auth_gate import AuthGate


def get_auth_gate(settings: Annotated[Settings, Depends(get_settings)]) -> AuthGate:
    return AuthGate(settings)


def require_admin(
    request: Request, gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> dict:
    """Guard for mutating endpoints. Returns {"email": ...}."""
    token = request.cookies.get(gate.settings.auth_cookie_name)
    if not token:
        raise UnauthorizedError("Authentication required")
    return gate.verify(token)


def optional_admin(
    request: Request, gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> dict | None:
    """Admin identity if the caller holds a valid credential, else None."""
    token = request.cookies.get(gate.settings.auth_cookie_name)
    if not token:
        return None
    try:
        return gate.verify(token)
    except PortfolioError:
        return None


AdminUser = Annotated[dict, Depends(require_admin)]
MaybeAdmin = Annotated[dict | None, Depends(optional_admin)]
