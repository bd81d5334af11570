"""Request Pipeline: shared normalize -> validate step and write-path error mapping.

Invariants:
    - accept() either returns a typed record or raises ValidationFailure; it never does IO
    - Inside as_write(), a QueryFailure surfaces with HTTP 422; read paths keep 400
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Sequence
from uuid import UUID

from taskboard.core.domain_types import Entity
from taskboard.core.errors import ErrorContext, QueryFailure, ValidationFailure, Violation
from taskboard.core.normalize import normalize
from taskboard.core.rules import RULES
from taskboard.core.store_protocols import QueryExecutor, Row
from taskboard.core.validation import Invalid, validate

logger = logging.getLogger(__name__)

WRITE_FAILURE_STATUS = 422


def accept(
    entity: Entity, body: Any, path: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Normalize and validate an untrusted payload for `entity`."""
    if not isinstance(body, Mapping):
        raise ValidationFailure(
            [Violation("body", "object", "body must be a JSON object")],
            ErrorContext(entity=entity.value, operation="normalize"),
        )
    result = validate(normalize(entity, body, path), RULES[entity])
    if isinstance(result, Invalid):
        logger.info(
            f"Rejected {entity.value}: {[v.field for v in result.violations]}",
            extra={"entity": entity.value, "operation": "validate"},
        )
        raise ValidationFailure(
            list(result.violations),
            ErrorContext(entity=entity.value, operation="validate"),
        )
    return result.record


@contextmanager
def as_write(entity: Entity) -> Iterator[None]:
    """Report store failures on write paths as 422."""
    try:
        yield
    except QueryFailure as exc:
        exc.http_status = WRITE_FAILURE_STATUS
        exc.context.entity = exc.context.entity or entity.value
        raise


def as_uuid(value: Any) -> UUID:
    """Parse an id returned by the store; raises ValueError if it is not UUID-shaped."""
    return value if isinstance(value, UUID) else UUID(str(value))


async def insert_one(
    executor: QueryExecutor, template: str, params: Sequence[Any],
) -> Row:
    rows = await executor.execute(template, params)
    if not rows:
        raise QueryFailure("insert returned no row", "insert")
    return rows[0]
