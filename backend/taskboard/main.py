"""Task Board API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskBoardError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The database handle is built on startup and disposed on shutdown (lifespan)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.error_handlers import register_error_handlers
from taskboard.api.routes import boards, cards, health, lists, users
from taskboard.config import get_settings
from taskboard.infrastructure.database import close_db, init_db
from taskboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.log_sql)
    init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout_seconds,
        statement_timeout=settings.statement_timeout_seconds,
    )
    logger.info("Task Board API started")
    yield
    await close_db()
    logger.info("Task Board API shut down")


app = FastAPI(title="Task Board API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(boards.router)
app.include_router(lists.router)
app.include_router(cards.router)

register_error_handlers(app)
