"""Root conftest: shared test configuration.

Required settings are set before any folio module is imported, because
folio.main reads them at import time.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-signing-secret-not-for-production")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ADMIN_PASSWORD", "correct horse battery staple")
os.environ.setdefault("LOG_FORMAT", "text")
