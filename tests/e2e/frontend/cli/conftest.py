"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, run tests within an
isolated filesystem, and point the CLI at a freshly migrated SQLite file.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from bloglist.entrypoints.cli.main import bloglist

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'bloglist.demo'
    logger and additional messages on a 'some.thirdparty' logger.
    """
    logger = logging.getLogger("bloglist.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    bloglist.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(bloglist, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def cli_env(tmp_path: Path, runner: CliRunner) -> dict[str, str]:
    """Environment for a CLI backed by a migrated SQLite file.

    The flight recorder writes under the test's temp dir.
    """
    env = {
        "BLOGLIST_DB_URL": f"sqlite:///{tmp_path / 'bloglist.db'}",
        "BLOGLIST_LOG_PATH": str(tmp_path / "latest.log"),
        "BLOGLIST_TOKEN": "",
    }
    result = runner.invoke(bloglist, ["db", "upgrade", "--force"], env=env)
    assert result.exit_code == 0, result.output
    return env

