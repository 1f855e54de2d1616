"""Module defining Commands.

Secrets and session tokens are excluded from ``repr`` so commands can be
logged safely.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RegisterUser(Command):
    """Command to register a new user account."""

    name: str
    username: str
    secret: str = field(repr=False)


@dataclass(frozen=True)
class LogIn(Command):
    """Command to authenticate and open a session."""

    username: str
    secret: str = field(repr=False)


@dataclass(frozen=True)
class LogOut(Command):
    """Command to end a session. Ending an already-ended session is a no-op."""

    token: str = field(repr=False)


@dataclass(frozen=True)
class CreateBlog(Command):
    """Command to publish a blog as the session's user."""

    token: str = field(repr=False)
    title: str
    author: str
    url: str


@dataclass(frozen=True)
class LikeBlog(Command):
    """Command to add one like to a blog."""

    blog_id: str


@dataclass(frozen=True)
class DeleteBlog(Command):
    """Command to delete a blog owned by the session's user."""

    token: str = field(repr=False)
    blog_id: str


@dataclass(frozen=True)
class ResetState(Command):
    """Administrative command clearing all users, sessions and blogs."""
