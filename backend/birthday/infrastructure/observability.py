"""Structured Logging — JSON log lines carrying profile context.

Invariants:
    - Every line has timestamp (time the record was created, UTC), level, logger, message
    - Profile extras (profile_id, operation, error_code, field, path) appear only when set
    - setup_logging installs exactly one "birthday" handler on the root logger, however
      often it runs (app factory, tests, reloads)
    - aiosqlite's per-statement debug chatter stays at WARNING

Design Decisions:
    - JSON in production, plain text for local runs (LOG_FORMAT=text)
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "birthday"
_EXTRA_KEYS = ("profile_id", "operation", "error_code", "field", "path")
_QUIET_LOGGERS = ("aiosqlite",)


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application log handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
