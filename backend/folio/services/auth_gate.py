"""Auth Gate: issues and verifies the signed admin credential.

Invariants:
    - Exactly one admin identity, read from settings (no users table)
    - Tokens are HS256 JWTs carrying {sub, email, iat, exp}; exp = iat + token_ttl_hours
    - verify() checks signature and expiry only: no revocation list, so a leaked token
      stays valid until it expires (accepted constraint of stateless credentials)
    - Password comparison is constant-time; passwords are never logged

Design Decisions:
    - Stateless signed token over a session table: nothing to persist or clean up
    - python-jose for JWT encode/decode: expiry check comes with decode()
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from folio.config import Settings
from folio.core.errors import InvalidCredentialsError, UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


@dataclass(frozen=True)
class Credential:
    """Signed token plus the facts needed to set the cookie."""
    token: str
    email: str
    expires_at: datetime
    max_age_seconds: int


class AuthGate:
    """Login and token verification against the configured admin identity."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def ttl(self) -> timedelta:
        return timedelta(hours=self.settings.token_ttl_hours)

    def login(self, email: str, password: str) -> Credential:
        """Issue a credential if email and password match the admin identity."""
        email_ok = secrets.compare_digest(
            email.strip().lower().encode(),
            self.settings.admin_email.strip().lower().encode(),
        )
        password_ok = secrets.compare_digest(
            password.encode(), self.settings.admin_password.encode(),
        )
        if not (email_ok and password_ok):
            logger.warning("Admin login rejected")
            raise InvalidCredentialsError()

        credential = self.issue(self.settings.admin_email)
        logger.info("Admin login succeeded")
        return credential

    def issue(self, email: str, now: datetime | None = None) -> Credential:
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + self.ttl
        claims = {
            "sub": email,
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self.settings.jwt_secret, algorithm=ALGORITHM)
        return Credential(
            token=token,
            email=email,
            expires_at=expires_at,
            max_age_seconds=int(self.ttl.total_seconds()),
        )

    def verify(self, token: str) -> dict:
        """Return {"email": ...} for a valid token, else raise UnauthorizedError."""
        try:
            claims = jwt.decode(
                token, self.settings.jwt_secret, algorithms=[ALGORITHM],
            )
        except ExpiredSignatureError:
            raise UnauthorizedError("Session expired")
        except JWTError:
            raise UnauthorizedError("Invalid token")

        email = claims.get("email")
        if not email or email.lower() != self.settings.admin_email.lower():
            raise UnauthorizedError("Invalid token")
        return {"email": email}
