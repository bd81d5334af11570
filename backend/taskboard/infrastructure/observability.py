"""Structured Logging: one JSON line per event, carrying the pipeline's own fields.

Invariants:
    - Every line has timestamp, level, logger and message
    - Pipeline fields (entity, operation, transaction_state, error_code, cause_code,
      status_code, path) appear only when the call site supplied them
    - setup_logging() owns exactly one root handler; calling it again replaces it
    - SQL statement logging stays at WARNING unless explicitly enabled

Design Decisions:
    - Call sites attach fields via `extra=`; the formatter never parses messages
"""

import json
import logging
from datetime import datetime, timezone

PIPELINE_FIELDS = (
    "entity",
    "operation",
    "transaction_state",
    "error_code",
    "cause_code",
    "status_code",
    "path",
)

_SQL_LOGGER = "sqlalchemy.engine"


class JSONFormatter(logging.Formatter):
    """Render a record and its pipeline fields as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update(pipeline_fields(record))
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def pipeline_fields(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in PIPELINE_FIELDS
        if record.__dict__.get(key) is not None
    }


class _TaskBoardHandler(logging.StreamHandler):
    """Marker type so setup_logging() can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json", log_sql: bool = False):
    """Install the task board's root handler, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _TaskBoardHandler)]:
        root.removeHandler(existing)

    handler = _TaskBoardHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger(_SQL_LOGGER).setLevel(
        logging.INFO if log_sql else logging.WARNING,
    )
