"""API Layer: FastAPI routes, auth dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every mutating route depends on require_admin before anything touches the database

Design Decisions:
    - Thin routes delegate to services
"""
