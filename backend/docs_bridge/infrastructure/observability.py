"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (tool_name, error_kind, credential_source, duration_ms, path)
      surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - setup_logging called on startup via lifespan (and by the authorize script);
      repeated calls replace the handler instead of stacking it
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "tool_name", "error_kind", "credential_source", "duration_ms",
    "document_id", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


# googleapiclient logs a warning per build() when file_cache is unavailable
_NOISY_LOGGERS = ("googleapiclient.discovery_cache", "google_auth_httplib2")


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application. Safe to call more than once."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if getattr(existing, "_docs_bridge", False):
            logging.root.removeHandler(existing)
    handler._docs_bridge = True
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)
