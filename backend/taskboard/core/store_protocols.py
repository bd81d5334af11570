"""Boundary Protocols: contracts between the services and the store.

Invariants:
    - Services depend on QueryExecutor, never on a concrete connection type
    - Implementations provided by infrastructure/database.py (Database, Transaction)

Design Decisions:
    - Protocol over ABC: Database and Transaction share no base class
"""

from typing import Any, Protocol, Sequence

Row = dict[str, Any]


class QueryExecutor(Protocol):
    """Runs one parameterized statement; `$n` placeholders bind params[n-1]."""
    async def execute(
        self, template: str, params: Sequence[Any] = (),
    ) -> list[Row]: ...
