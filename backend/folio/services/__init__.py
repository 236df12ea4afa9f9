"""Services Layer: imperative shell around the pure core.

Invariants:
    - Each service wraps one AsyncSession for the lifetime of a request
    - Services raise PortfolioError subclasses, never HTTP exceptions
    - No service keeps entity state between calls: every call reloads
"""
