"""Unit tests for database dialect handling."""

import pytest

from bloglist.adapters.db.dialects import DialectName, UnsupportedDialect


@pytest.mark.parametrize(
    "input_str,expected",
    [
        ("postgresql", DialectName.POSTGRES),
        ("postgres", DialectName.POSTGRES),
        ("postgresql+psycopg", DialectName.POSTGRES),
        ("SQLite", DialectName.SQLITE),
        ("sqlite+pysqlite", DialectName.SQLITE),
    ],
)
def test_from_string_aliases(input_str, expected):
    """Aliases and driver-qualified names map to a DialectName."""
    assert DialectName.from_string(input_str) is expected


@pytest.mark.parametrize("bad", [None, "", "mysql"])
def test_from_string_rejects_unsupported(bad):
    """Unknown dialects raise UnsupportedDialect."""
    with pytest.raises(UnsupportedDialect):
        DialectName.from_string(bad)


def test_from_sqlalchemy(sqlite_engine_memory):
    """The dialect is read from an Engine."""
    assert DialectName.from_sqlalchemy(sqlite_engine_memory) is DialectName.SQLITE
