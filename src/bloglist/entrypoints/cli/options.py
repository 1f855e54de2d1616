"""Options shared by several BLOGLIST commands."""

import click

from bloglist.config import TOKEN_ENV

token_option = click.option(
    "--token",
    "token",
    envvar=TOKEN_ENV,
    required=True,
    show_envvar=True,
    help="Session token printed by 'bloglist login'.",
)

optional_token_option = click.option(
    "--token",
    "token",
    envvar=TOKEN_ENV,
    default=None,
    show_envvar=True,
    help="Session token; when given, blogs you may delete are marked.",
)
