"""Access to the bootstrapped application from CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from bloglist import config
from bloglist.bootstrap import AppContainer, bootstrap
from bloglist.domain import notices
from bloglist.domain.errors import DomainError
from bloglist.interfaces.errors import StoreError

from .messages import notify

MISSING_DB_URL_MSG = (
    f"{config.DB_URL_ENV} is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    f"  export {config.DB_URL_ENV}='sqlite:///bloglist.db'\n"
    "  or in PowerShell:\n"
    f"  $env:{config.DB_URL_ENV}='sqlite:///bloglist.db'"
)


def get_app() -> AppContainer:
    """Return the application container for the current CLI invocation.

    The container is built once per invocation and cached on the root Click
    context.

    Raises:
        click.ClickException: If the configuration is missing or invalid.
    """
    ctx = click.get_current_context()
    root = ctx.find_root()
    if (app := root.meta.get("bloglist.app")) is None:
        try:
            app = bootstrap()
        except config.DatabaseUrlNotSetError as e:
            raise click.ClickException(MISSING_DB_URL_MSG) from e
        except config.InvalidSettingError as e:
            raise click.ClickException(str(e)) from e
        root.meta["bloglist.app"] = app
    return app


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn rejected commands into a red notice and exit status 1."""
    try:
        yield
    except (DomainError, StoreError) as e:
        notify(notices.for_error(e))
        raise click.exceptions.Exit(1) from e
