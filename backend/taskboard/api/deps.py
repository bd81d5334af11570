"""Request Dependencies: raw JSON body extraction.

Invariants:
    - An empty body reads as {}; malformed JSON is a ValidationFailure (422), not a 400
    - The body is returned untyped; shape checks belong to services/pipeline.accept()
"""

import json
from typing import Any

from fastapi import Request

from taskboard.core.errors import ErrorContext, ValidationFailure, Violation


async def json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationFailure(
            [Violation("body", "json", "body must be valid JSON")],
            ErrorContext(operation="parse"),
        ) from exc
