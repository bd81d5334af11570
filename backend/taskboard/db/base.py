"""SQLAlchemy Declarative Base and the server-side UUID default shared by all tables.

Invariants:
    - All models inherit from Base
    - Every primary key defaults to new_uuid(), evaluated by the store per inserted row
"""

from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import Uuid


class Base(DeclarativeBase):
    """Base class for all task board ORM models."""
    pass


class new_uuid(FunctionElement):
    """Store-generated random UUID, rendered per dialect."""
    type = Uuid()
    name = "new_uuid"
    inherit_cache = True


@compiles(new_uuid)
def _new_uuid_postgresql(element, compiler, **kw):
    return "gen_random_uuid()"


@compiles(new_uuid, "sqlite")
def _new_uuid_sqlite(element, compiler, **kw):
    # 32 hex digits with v4 version/variant nibbles; matches Uuid's CHAR(32) storage
    return (
        "(lower(hex(randomblob(4)) || hex(randomblob(2)) || '4' || "
        "substr(hex(randomblob(2)), 2) || "
        "substr('89AB', 1 + (abs(random()) % 4), 1) || "
        "substr(hex(randomblob(2)), 2) || hex(randomblob(6))))"
    )
