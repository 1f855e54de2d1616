"""Administrative commands."""

import click
import click_extra as clickx

from bloglist.service_layer import commands

from .helpers import get_app, success, warn

RESET_WARNING = "This will remove every user, session and blog."


@click.group(cls=clickx.ExtraGroup)
def admin() -> None:
    """Administrative commands (testing and operations)."""


@admin.command()
@click.option("--force", is_flag=True, help="Reset without confirmation.")
def reset(force: bool) -> None:
    """Remove all users, sessions and blogs."""
    if not force:
        warn(RESET_WARNING)
        click.confirm("Are you sure you want to proceed?", abort=True)
    get_app().message_bus.handle(commands.ResetState())
    success("All data removed")
