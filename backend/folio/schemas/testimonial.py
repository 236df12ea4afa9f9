"""Testimonial Schemas: plain CRUD shapes with a 1-5 rating bound."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from folio.schemas.base import (
    CamelModel, OrmResponse, reject_explicit_nulls, strip_required,
)


class TestimonialCreate(CamelModel):
    content: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    role: str = Field(min_length=1, max_length=200)
    company: str | None = None
    image: str | None = None
    avatar: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    is_active: bool = True

    strip_text = field_validator("content", "name", "role")(strip_required)


class TestimonialUpdate(CamelModel):
    content: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1, max_length=200)
    role: str | None = Field(None, min_length=1, max_length=200)
    company: str | None = None
    image: str | None = None
    avatar: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    is_active: bool | None = None

    strip_text = field_validator("content", "name", "role")(strip_required)

    @model_validator(mode="after")
    def forbid_nulling_required(self):
        reject_explicit_nulls(self, ("content", "name", "role", "is_active"))
        return self


class TestimonialResponse(OrmResponse):
    id: UUID
    content: str
    name: str
    role: str
    company: str | None
    image: str | None
    avatar: str | None
    rating: int | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
