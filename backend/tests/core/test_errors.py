"""Error hierarchy: statuses, codes and response envelopes."""

from taskboard.core.errors import (
    ErrorCategory,
    QueryFailure,
    QueryTimeout,
    ResourceExhausted,
    TransactionFailure,
    TransactionStateError,
    ValidationFailure,
    Violation,
)


def test_validation_failure_lists_every_violation():
    exc = ValidationFailure([
        Violation("name", "required", "name is required"),
        Violation("email", "email", "email must be an email address"),
    ])
    body = exc.to_response()["error"]
    assert exc.http_status == 422
    assert body["code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in body["details"]] == ["name", "email"]


def test_query_failure_defaults_to_read_status():
    exc = QueryFailure("relation does not exist")
    assert exc.http_status == 400
    assert exc.store_message == "relation does not exist"
    assert "relation does not exist" in exc.to_response()["error"]["message"]


def test_pool_and_timeout_failures_are_query_failures():
    assert isinstance(ResourceExhausted(1.0), QueryFailure)
    assert isinstance(QueryTimeout(1.0), QueryFailure)
    assert ResourceExhausted(1.0).code == "RESOURCE_EXHAUSTED"
    assert QueryTimeout(1.0).category == ErrorCategory.TIMEOUT


def test_transaction_failure_shape():
    exc = TransactionFailure("FOREIGN KEY constraint failed", "create_board", "QUERY_FAILED")
    body = exc.to_response()["error"]
    assert exc.http_status == 422
    assert body["code"] == "TRANSACTION_FAILED"
    assert body["details"] == [{"cause": "QUERY_FAILED"}]


def test_transaction_state_error_is_internal():
    exc = TransactionStateError("commit", "committed")
    assert exc.http_status == 500
    assert "committed" in exc.message
