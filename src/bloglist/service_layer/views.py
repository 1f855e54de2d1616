"""Read-side views.

Every view reads the current state of the stores; nothing here is cached, so
results can never drift from the system of record.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from bloglist.domain.authorization import can_delete
from bloglist.domain.errors import ForbiddenError, InvalidSessionError
from bloglist.domain.model import Blog, User
from bloglist.domain.ranking import rank_by_likes
from bloglist.interfaces.errors import BlogNotFoundError
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork

from . import sessions
from .sessions import Clock, utc_now


@dataclass(frozen=True, slots=True)
class BlogListing:
    """A ranked blog as seen by one caller."""

    blog: Blog
    deletable: bool


@dataclass(frozen=True, slots=True)
class UserSummary:
    """Public facts about a user. Never includes the secret hash."""

    user_id: str
    name: str
    username: str
    blog_count: int


def list_blogs(uow: AbstractUnitOfWork) -> list[Blog]:
    """All blogs in creation order."""
    with uow:
        return uow.blogs.list()


def ranked_list(uow: AbstractUnitOfWork) -> list[Blog]:
    """All blogs, most liked first; ties keep creation order."""
    return rank_by_likes(list_blogs(uow))


def get_blog(uow: AbstractUnitOfWork, blog_id: str) -> Blog:
    """A single blog.

    Raises:
        BlogNotFoundError: If the blog does not exist.
    """
    with uow:
        if (blog := uow.blogs.get(blog_id)) is None:
            raise BlogNotFoundError(blog_id)
        return blog


def deletable_blog(
    uow: AbstractUnitOfWork, token: str | None, blog_id: str, *, clock: Clock = utc_now
) -> Blog:
    """A blog the session holder may delete, for confirming before deletion.

    Raises:
        InvalidSessionError: If the token is not a valid session.
        BlogNotFoundError: If the blog does not exist.
        ForbiddenError: If the caller does not own the blog.
    """
    with uow:
        caller_id = sessions.resolve(uow, token, clock=clock)
        if (blog := uow.blogs.get(blog_id)) is None:
            raise BlogNotFoundError(blog_id)
    if not can_delete(caller_id, blog):
        raise ForbiddenError(blog_id)
    return blog


def blog_listing(
    uow: AbstractUnitOfWork, token: str | None = None, *, clock: Clock = utc_now
) -> list[BlogListing]:
    """The ranked list with a per-blog flag telling whether the caller may delete it.

    Anonymous callers (no token) may delete nothing.

    Raises:
        InvalidSessionError: If a token is given but is not a valid session.
    """
    with uow:
        caller_id = sessions.resolve(uow, token, clock=clock) if token else None
        blogs = uow.blogs.list()
    return [
        BlogListing(blog=blog, deletable=can_delete(caller_id, blog))
        for blog in rank_by_likes(blogs)
    ]


def current_user(
    uow: AbstractUnitOfWork, token: str | None, *, clock: Clock = utc_now
) -> User:
    """The user a session token belongs to.

    Raises:
        InvalidSessionError: If the token is not a valid session, or its user
            no longer exists.
    """
    with uow:
        user_id = sessions.resolve(uow, token, clock=clock)
        if (user := uow.users.get(user_id)) is None:
            raise InvalidSessionError()
        return user


def user_summaries(uow: AbstractUnitOfWork) -> list[UserSummary]:
    """All users in registration order, with how many blogs each owns."""
    with uow:
        users = uow.users.list()
        counts = Counter(blog.owner_id for blog in uow.blogs.list())
    return [
        UserSummary(
            user_id=user.user_id,
            name=user.name,
            username=user.username,
            blog_count=counts[user.user_id],
        )
        for user in users
    ]
