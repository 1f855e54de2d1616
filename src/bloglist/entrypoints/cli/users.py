"""User account commands."""

import click
import click_extra as clickx

from bloglist.service_layer import commands, views

from .helpers import get_app, handle_errors, success


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """Register and list user accounts."""


@users.command()
@click.option("--name", prompt=True, help="Display name.")
@click.option("--username", prompt=True, help="Unique login name (3+ characters).")
@click.password_option("--password", help="Password (3+ characters; prompted if omitted).")
def register(name: str, username: str, password: str) -> None:
    """Register a new user and print their id."""
    app = get_app()
    with handle_errors():
        user_id = app.message_bus.handle(
            commands.RegisterUser(name=name, username=username, secret=password)
        )
    success(f"User {username.strip()} registered")
    click.echo(user_id)


@users.command(name="list")
def list_users() -> None:
    """List users with the number of blogs each has published."""
    app = get_app()
    for summary in views.user_summaries(app.uow):
        click.echo(
            f"{summary.username}\t{summary.name}\t{summary.blog_count} blog(s)\t{summary.user_id}"
        )
