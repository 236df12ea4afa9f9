"""Schema base classes and shared validators."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case input, serializes camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrmResponse(CamelModel):
    """Response model read straight from an ORM instance."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


def strip_required(v: str | None) -> str | None:
    """Strip a required text field; whitespace-only counts as missing."""
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty or whitespace")
    return v


def clean_tags(v: list[str] | None) -> list[str] | None:
    """Strip tags and drop empties, keeping first-seen order."""
    if v is None:
        return v
    seen: list[str] = []
    for tag in (t.strip() for t in v):
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def reject_explicit_nulls(model: BaseModel, fields: tuple[str, ...]) -> None:
    """Partial updates may omit required fields but never null them out."""
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")
