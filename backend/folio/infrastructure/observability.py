"""Structured Logging: one JSON object per record for the content API.

Invariants:
    - Every record carries timestamp (the record's creation time, UTC), level, logger, message
    - Content context passed via `extra=` (resource, resource_id, slug, direction,
      error_code, path) is lifted to top-level keys when present
    - setup_logging owns exactly one root handler: calling it again replaces it

Design Decisions:
    - Standard logging plus a small formatter, no logging library
    - Text format for local runs and tests, JSON for deployments
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_KEYS = (
    "resource", "resource_id", "slug", "direction", "error_code", "path",
)
_HANDLER_NAME = "folio"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in CONTEXT_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root handler."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
