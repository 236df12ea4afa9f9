"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; services receive clean values
    - Wire names are camelCase (liveUrl, isActive, readingTime), Python names snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Update schemas are partial: services apply model_dump(exclude_unset=True)
"""
