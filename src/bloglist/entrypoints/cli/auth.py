"""Session commands: ``login``, ``logout`` and ``whoami``."""

import click

from bloglist.service_layer import commands, views

from .helpers import get_app, handle_errors, success
from .options import token_option


@click.command()
@click.option("--username", prompt=True, help="Your username.")
@click.password_option(
    "--password", confirmation_prompt=False, help="Your password (prompted if omitted)."
)
def login(username: str, password: str) -> None:
    """Log in and print a session token on stdout.

    Export it as BLOGLIST_TOKEN to use it with later commands.
    """
    app = get_app()
    with handle_errors():
        token = app.message_bus.handle(commands.LogIn(username=username, secret=password))
    success(f"Logged in as {username}")
    click.echo(token)


@click.command()
@token_option
def logout(token: str) -> None:
    """End the session."""
    get_app().message_bus.handle(commands.LogOut(token=token))
    success("Logged out")


@click.command()
@token_option
def whoami(token: str) -> None:
    """Show the user the session belongs to."""
    app = get_app()
    with handle_errors():
        user = views.current_user(app.uow, token, clock=app.clock)
    click.echo(f"{user.name} ({user.username})")
