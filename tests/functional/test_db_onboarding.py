"""Functional tests for the ``bloglist db`` subcommands.

Scope
-----
End-to-end verification of the database CLI via ``click.testing.CliRunner``
against a scratch SQLite file. Commands covered: ``current``, ``heads``,
``history``, ``status``, and ``upgrade``.

What these tests assert
-----------------------
* When ``BLOGLIST_DB_URL`` is unset/empty, commands that require a connection
  fail with exit code ``1`` and emit :data:`MISSING_DB_URL_MSG`.
* The ``memory`` backend has no schema to manage.
* ``db upgrade`` prompts with a safety warning, supports ``--sql`` dry runs and
  applies migrations when the user confirms.
* ``db status`` reports connectivity, backend, URL and schema state.
"""

import re

import pytest
from click.testing import CliRunner

from bloglist.entrypoints.cli.db import (
    MEMORY_BACKEND_MSG,
    UPGRADE_SCHEMA_INSTRUCTIONS,
    UPGRADE_SCHEMA_WARNING,
)
from bloglist.entrypoints.cli.helpers.app import MISSING_DB_URL_MSG
from bloglist.entrypoints.cli.main import bloglist as bloglist_cli

BASE_REVISION = "3f1c2a9d7b40"
REV_RE = re.compile(r"\b[0-9a-f]{12}\b")


def _revs(text: str) -> set[str]:
    """Extract unique Alembic revision identifiers from ``text``."""
    return set(REV_RE.findall(text))


@pytest.mark.parametrize(
    "cmd",
    [["db", "current"], ["db", "history", "-i"], ["db", "upgrade"]],
)
def test_db_no_url(cmd):
    """db commands requiring a connection error out if BLOGLIST_DB_URL is not set."""
    runner = CliRunner(env={"BLOGLIST_DB_URL": ""})

    result = runner.invoke(bloglist_cli, cmd)
    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output


def test_db_memory_backend():
    """The in-memory backend cannot be migrated."""
    runner = CliRunner(env={"BLOGLIST_DB_URL": "memory"})
    result = runner.invoke(bloglist_cli, ["db", "upgrade", "--force"])
    assert result.exit_code == 1
    assert MEMORY_BACKEND_MSG in result.output


def test_db_heads_needs_no_database():
    """The head revision is known without a connection."""
    result = CliRunner(env={"BLOGLIST_DB_URL": ""}).invoke(bloglist_cli, ["db", "heads"])
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in _revs(result.output)


@pytest.mark.slow
def test_new_user_initial_db_setup(sqlite_url: str):
    """Simulate a new user setting up the database step by step."""
    runner = CliRunner(env={"BLOGLIST_DB_URL": sqlite_url})

    # A fresh database has no revision.
    result = runner.invoke(bloglist_cli, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert not _revs(result.output)

    result = runner.invoke(bloglist_cli, ["db", "status"])
    assert result.exit_code == 0, result.output
    assert "Backend : sqlite" in result.output
    assert "Schema  : uninitialized" in result.output
    assert UPGRADE_SCHEMA_INSTRUCTIONS in result.output

    # They decline the upgrade prompt; nothing changes.
    result = runner.invoke(bloglist_cli, ["db", "upgrade"], input="n\n")
    assert result.exit_code == 1
    assert UPGRADE_SCHEMA_WARNING in result.output
    assert "Are you sure you want to proceed?" in result.output
    assert not _revs(runner.invoke(bloglist_cli, ["db", "current"]).output)

    # A dry run prints SQL without applying it.
    result = runner.invoke(bloglist_cli, ["db", "upgrade", "--sql"])
    assert result.exit_code == 0, result.output
    assert "CREATE TABLE users" in result.output
    assert not _revs(runner.invoke(bloglist_cli, ["db", "current"]).output)

    # They confirm.
    result = runner.invoke(bloglist_cli, ["db", "upgrade"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Upgrade complete!" in result.output

    result = runner.invoke(bloglist_cli, ["db", "current"])
    assert BASE_REVISION in _revs(result.output)

    result = runner.invoke(bloglist_cli, ["db", "history", "-i"])
    assert result.exit_code == 0, result.output
    assert "(current)" in result.output

    result = runner.invoke(bloglist_cli, ["db", "status"])
    assert f"Schema  : {BASE_REVISION} (up to date)" in result.output
