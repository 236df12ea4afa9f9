"""Auth Schemas: login body and session probe response."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=1000)


class SessionUser(BaseModel):
    email: str


class SessionResponse(BaseModel):
    authenticated: bool
    user: SessionUser | None = None
