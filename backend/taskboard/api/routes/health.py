"""Health Probes: process liveness and store readiness.

Invariants:
    - GET /health/ answers 200 without touching the store
    - GET /health/ready answers 503 when no handle exists or SELECT 1 fails,
      naming which of the two it was
    - Readiness reports how many connections the handle currently has leased
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from taskboard.infrastructure import database as db_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    logger.warning(f"Readiness failed: {reason}", extra={"operation": "readiness"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": "taskboard-api"}


@router.get("/ready")
async def readiness():
    """Round-trip SELECT 1 through the pool."""
    db = db_module.database
    if db is None:
        return _not_ready("database_not_initialized")
    if not await db.health_check():
        return _not_ready("database_unreachable")
    return {
        "status": "ready",
        "checks": {
            "database": "healthy",
            "leased_connections": db.leased_connections,
        },
    }
