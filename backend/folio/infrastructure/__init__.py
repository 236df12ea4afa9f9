"""Infrastructure Layer: database connection management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All storage exceptions leave this layer as StorageUnavailableError
"""
