"""Error Hierarchy: typed, categorized exceptions for every pipeline failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationFailure is raised before any write is attempted
    - QueryFailure carries the store's own message; it is never reclassified
    - to_response() produces the REST envelope consumed by the global handlers

Design Decisions:
    - Single hierarchy with TaskBoardError base: one FastAPI handler catches all
    - QueryFailure.http_status is 400 on read paths; write paths raise it to 422
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    TRANSACTION = "transaction"
    TIMEOUT = "timeout"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where in the pipeline an error happened."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class Violation:
    """One failed rule on one field."""
    field: str
    rule: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "rule": self.rule, "message": self.message}


class TaskBoardError(Exception):
    """Base exception for all task board errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def details(self) -> list[dict]:
        return []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "operation": self.context.operation,
                },
                "details": self.details(),
            }
        }


# ─── Client Errors ──────────────────────────────────────────────

class ValidationFailure(TaskBoardError):
    """One or more field-level violations. Nothing was written."""
    def __init__(
        self, violations: list[Violation], context: ErrorContext | None = None,
    ):
        fields = ", ".join(sorted({v.field for v in violations}))
        super().__init__(
            f"Invalid fields: {fields}", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 422,
        )
        self.violations = violations

    def details(self) -> list[dict]:
        return [v.to_dict() for v in self.violations]


# ─── Store Errors ───────────────────────────────────────────────

class QueryFailure(TaskBoardError):
    """The store rejected a statement or could not be reached."""
    def __init__(
        self,
        store_message: str,
        operation: str = "query",
        context: ErrorContext | None = None,
        code: str = "QUERY_FAILED",
        category: ErrorCategory = ErrorCategory.DATABASE,
        http_status: int = 400,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Database {operation} failed: {store_message}",
            code, category, ErrorSeverity.ERROR, ctx, http_status,
        )
        self.store_message = store_message
        self.operation = operation


class ResourceExhausted(QueryFailure):
    """No pooled connection became available within the acquire timeout."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"no connection available after {timeout_seconds}s", "acquire",
            context, "RESOURCE_EXHAUSTED", ErrorCategory.RESOURCE_EXHAUSTED,
        )
        self.severity = ErrorSeverity.CRITICAL


class QueryTimeout(QueryFailure):
    """A statement did not complete within the statement timeout."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"statement exceeded {timeout_seconds}s", "execute",
            context, "QUERY_TIMEOUT", ErrorCategory.TIMEOUT,
        )


class TransactionFailure(QueryFailure):
    """A failure between begin and commit. Raised after rollback and release."""
    def __init__(
        self,
        store_message: str,
        operation: str = "transaction",
        cause_code: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            store_message, operation, context, "TRANSACTION_FAILED",
            ErrorCategory.TRANSACTION, 422,
        )
        self.cause_code = cause_code

    def details(self) -> list[dict]:
        if not self.cause_code:
            return []
        return [{"cause": self.cause_code}]


# ─── Programming Errors ─────────────────────────────────────────

class TransactionStateError(TaskBoardError):
    """Illegal transaction state transition (e.g. commit after rollback)."""
    def __init__(self, action: str, state: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot {action} a transaction in state '{state}'",
            "TRANSACTION_STATE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.action = action
        self.state = state
