"""Folio Application Package: admin-gated content API for a personal portfolio.

Invariants:
    - Package root contains no executable code (import side-effects prohibited); only the version constant lives here
"""

__version__ = "1.0.0"
