"""Dialect-specific insert statements that do not raise on unique conflicts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from bloglist.adapters.db.dialects import DialectName, UnsupportedDialect

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.dml import Insert


def insert_or_nothing(connection: Connection, table: Table, values: dict[str, Any]) -> Insert:
    """Build an INSERT that silently skips the row on any unique conflict.

    The caller decides what a skipped row means by checking ``rowcount``.
    """
    dialect = DialectName.from_sqlalchemy(connection)
    if dialect is DialectName.POSTGRES:
        return pg_insert(table).values(**values).on_conflict_do_nothing()
    if dialect is DialectName.SQLITE:
        return sqlite_insert(table).values(**values).on_conflict_do_nothing()
    # from_sqlalchemy already rejects anything else
    raise UnsupportedDialect(f"Unsupported dialect: {dialect}")  # pragma: no cover
