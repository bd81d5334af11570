"""Database Handle: pooled query execution and the transaction coordinator.

Invariants:
    - SQL templates use positional placeholders ($1, $2, ...); values are always bound
      parameters, never spliced into the SQL text
    - Outside a transaction every execute() borrows one pooled connection and commits
    - A Transaction owns exactly one dedicated connection from begin() until it reaches
      COMMITTED or ROLLED_BACK, and releases it exactly once on every exit path
    - All SQLAlchemy exceptions leave this module as QueryFailure (core/errors.py), with
      the store's message attached and no further classification
    - leased_connections returns to its previous value after every call

Design Decisions:
    - Explicit Database handle built in the FastAPI lifespan and injected with Depends(get_db)
    - Bounded pool wait (pool_timeout) -> ResourceExhausted; bounded statement wait -> QueryTimeout
    - Bind types are chosen from the Python value so UUIDs, dates and booleans reach every
      dialect in its native form
"""

import asyncio
import logging
import re
from contextlib import asynccontextmanager
from datetime import date
from typing import Any, AsyncGenerator, Sequence
from uuid import UUID

from sqlalchemy import Boolean, Date, Uuid, bindparam, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeout
from sqlalchemy.ext.asyncio import (
    AsyncConnection, AsyncEngine, AsyncTransaction, create_async_engine,
)
from sqlalchemy.sql.elements import TextClause

from taskboard.core.domain_types import TransactionState
from taskboard.core.errors import (
    QueryFailure,
    QueryTimeout,
    ResourceExhausted,
    TransactionFailure,
    TransactionStateError,
)
from taskboard.core.store_protocols import Row

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def store_message(exc: SQLAlchemyError) -> str:
    """The driver's own message when there is one."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _bind_type(value: Any):
    if isinstance(value, bool):
        return Boolean()
    if isinstance(value, UUID):
        return Uuid()
    if isinstance(value, date):
        return Date()
    return None


def compile_template(template: str, params: Sequence[Any]) -> TextClause:
    """Turn `$n` placeholders into bound parameters p1..pn."""
    indexes = {int(n) for n in _PLACEHOLDER.findall(template)}
    if indexes != set(range(1, len(params) + 1)):
        raise QueryFailure(
            f"template uses placeholders {sorted(indexes)} "
            f"but {len(params)} parameter(s) were given",
            "prepare",
        )
    sql = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", template)
    return text(sql).bindparams(*(
        bindparam(f"p{i}", value, type_=_bind_type(value))
        for i, value in enumerate(params, start=1)
    ))


async def run_statement(
    connection: AsyncConnection,
    template: str,
    params: Sequence[Any],
    timeout: float | None = None,
) -> list[Row]:
    """Execute one statement on an already-acquired connection."""
    statement = compile_template(template, params)
    try:
        if timeout:
            result = await asyncio.wait_for(connection.execute(statement), timeout)
        else:
            result = await connection.execute(statement)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]
    except asyncio.TimeoutError as exc:
        logger.error(f"Statement timed out after {timeout}s")
        raise QueryTimeout(timeout) from exc
    except SQLAlchemyError as exc:
        logger.warning(f"Statement failed: {store_message(exc)}")
        raise QueryFailure(store_message(exc), "execute") from exc


class Database:
    """Pool handle: single-statement execution, scoped transactions, health checks."""

    def __init__(
        self,
        engine: AsyncEngine,
        acquire_timeout: float | None = None,
        statement_timeout: float | None = None,
    ):
        self.engine = engine
        self.acquire_timeout = acquire_timeout
        self.statement_timeout = statement_timeout
        self._leased = 0

    @classmethod
    def from_url(
        cls,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_timeout: float = 30.0,
        statement_timeout: float | None = None,
    ) -> "Database":
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        return cls(
            engine, acquire_timeout=pool_timeout,
            statement_timeout=statement_timeout,
        )

    @property
    def leased_connections(self) -> int:
        """Connections currently borrowed through this handle."""
        return self._leased

    async def acquire(self) -> AsyncConnection:
        connection = self.engine.connect()
        try:
            await connection.start()
        except PoolTimeout as exc:
            logger.error("Connection pool exhausted")
            raise ResourceExhausted(self.acquire_timeout) from exc
        except SQLAlchemyError as exc:
            logger.error(f"Could not connect: {store_message(exc)}")
            raise QueryFailure(store_message(exc), "connect") from exc
        except OSError as exc:
            # asyncpg raises socket errors (refused, unreachable) unwrapped
            logger.error(f"Could not reach the database: {exc}")
            raise QueryFailure(str(exc), "connect") from exc
        self._leased += 1
        return connection

    async def release(self, connection: AsyncConnection) -> None:
        try:
            await connection.close()
        finally:
            self._leased -= 1

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[AsyncConnection, None]:
        connection = await self.acquire()
        try:
            yield connection
        finally:
            await self.release(connection)

    async def execute(self, template: str, params: Sequence[Any] = ()) -> list[Row]:
        """Run one statement on a pooled connection and commit it."""
        async with self.connection() as connection:
            rows = await run_statement(
                connection, template, params, self.statement_timeout,
            )
            try:
                await connection.commit()
            except SQLAlchemyError as exc:
                raise QueryFailure(store_message(exc), "commit") from exc
            return rows

    @asynccontextmanager
    async def transaction(
        self, label: str = "transaction",
    ) -> AsyncGenerator["Transaction", None]:
        """Scoped transaction: commit on success, rollback on any failure, always release.

        A QueryFailure raised inside the scope surfaces as TransactionFailure.
        """
        tx = Transaction(self, label)
        await tx.begin()
        try:
            yield tx
        except QueryFailure as exc:
            await tx.rollback_if_open()
            if isinstance(exc, TransactionFailure):
                raise
            raise TransactionFailure(
                exc.store_message, label, cause_code=exc.code,
            ) from exc
        except (Exception, asyncio.CancelledError):
            await tx.rollback_if_open()
            raise
        else:
            if not tx.state.is_terminal:
                await tx.commit()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.execute("SELECT 1")
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


class Transaction:
    """IDLE -> OPEN -> COMMITTED | ROLLED_BACK on one dedicated connection.

    Any transition not in that graph raises TransactionStateError. There is no
    nested scope: a task holds at most one dedicated connection.
    """

    def __init__(self, database: Database, label: str = "transaction"):
        self.state = TransactionState.IDLE
        self.label = label
        self._database = database
        self._connection: AsyncConnection | None = None
        self._transaction: AsyncTransaction | None = None

    def _require_open(self, action: str) -> None:
        if self.state is not TransactionState.OPEN:
            raise TransactionStateError(action, self.state.value)

    async def begin(self) -> None:
        if self.state is not TransactionState.IDLE:
            raise TransactionStateError("begin", self.state.value)
        connection = await self._database.acquire()
        try:
            self._transaction = await connection.begin()
        except SQLAlchemyError as exc:
            self.state = TransactionState.ROLLED_BACK
            await self._database.release(connection)
            raise TransactionFailure(store_message(exc), "begin") from exc
        self._connection = connection
        self.state = TransactionState.OPEN
        logger.debug(
            f"Transaction {self.label} opened",
            extra={"operation": self.label, "transaction_state": self.state.value},
        )

    async def execute(self, template: str, params: Sequence[Any] = ()) -> list[Row]:
        """Run a statement on this transaction's connection, in program order."""
        self._require_open("execute on")
        return await run_statement(
            self._connection, template, params, self._database.statement_timeout,
        )

    async def commit(self) -> None:
        self._require_open("commit")
        try:
            await self._transaction.commit()
        except SQLAlchemyError as exc:
            self.state = TransactionState.ROLLED_BACK
            logger.warning(
                f"Transaction {self.label} failed to commit: {store_message(exc)}",
                extra={"operation": self.label, "transaction_state": self.state.value},
            )
            raise TransactionFailure(store_message(exc), "commit") from exc
        else:
            self.state = TransactionState.COMMITTED
            logger.debug(
                f"Transaction {self.label} committed",
                extra={"operation": self.label, "transaction_state": self.state.value},
            )
        finally:
            await self._release()

    async def rollback(self) -> None:
        self._require_open("roll back")
        try:
            await self._transaction.rollback()
        except SQLAlchemyError as exc:
            raise TransactionFailure(store_message(exc), "rollback") from exc
        finally:
            self.state = TransactionState.ROLLED_BACK
            await self._release()
            logger.warning(
                f"Transaction {self.label} rolled back",
                extra={"operation": self.label, "transaction_state": self.state.value},
            )

    async def rollback_if_open(self) -> None:
        if self.state is TransactionState.OPEN:
            await self.rollback()

    async def _release(self) -> None:
        connection, self._connection = self._connection, None
        self._transaction = None
        if connection is not None:
            await self._database.release(connection)


# Singleton (initialized on startup)
database: Database | None = None


def init_db(database_url: str, **kwargs) -> Database:
    global database
    database = Database.from_url(database_url, **kwargs)
    return database


async def close_db() -> None:
    global database
    if database is not None:
        await database.dispose()
        database = None


def get_db() -> Database:
    """FastAPI dependency for the database handle."""
    if not database:
        raise RuntimeError("Database not initialized")
    return database
