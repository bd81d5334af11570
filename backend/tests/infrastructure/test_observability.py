"""Structured logging: pipeline fields in JSON lines, idempotent setup."""

import json
import logging

import pytest

from taskboard.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "taskboard.services.boards", logging.WARNING, __file__, 1,
        "Board rejected", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_line_carries_pipeline_fields():
    line = json.loads(JSONFormatter().format(_record(
        entity="board", operation="create_board", cause_code="QUERY_FAILED",
        status_code=422, transaction_state=None,
    )))
    assert line["message"] == "Board rejected"
    assert line["level"] == "WARNING"
    assert line["entity"] == "board"
    assert line["cause_code"] == "QUERY_FAILED"
    assert line["status_code"] == 422
    assert "transaction_state" not in line


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    sql_level = logging.getLogger("sqlalchemy.engine").level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)


def test_setup_logging_replaces_its_own_handler(restore_root_logger):
    root = restore_root_logger
    before = len(root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    assert len(root.handlers) == before + 1
    assert root.level == logging.INFO
    assert not isinstance(root.handlers[-1].formatter, JSONFormatter)


def test_sql_logging_is_opt_in(restore_root_logger):
    setup_logging("INFO", "json")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    setup_logging("INFO", "json", log_sql=True)
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
