"""Enforced ownership check in front of blog deletion."""

import logging

from bloglist.domain.authorization import can_delete
from bloglist.domain.errors import ForbiddenError
from bloglist.domain.model import Blog
from bloglist.interfaces.errors import BlogNotFoundError
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


def request_delete(uow: AbstractUnitOfWork, caller_id: str, blog_id: str) -> Blog:
    """Delete a blog on behalf of `caller_id`, if and only if they own it.

    The store's `remove` is never reached for a non-owner. Ownership is fixed
    at creation, so checking it before removing cannot go stale.

    Returns:
        The removed blog.

    Raises:
        BlogNotFoundError: If the blog does not exist.
        ForbiddenError: If `caller_id` is not the blog's owner.
    """
    if (blog := uow.blogs.get(blog_id)) is None:
        raise BlogNotFoundError(blog_id)
    if not can_delete(caller_id, blog):
        logger.warning(
            "User %s denied deleting blog %s owned by %s",
            caller_id,
            blog_id,
            blog.owner_id,
        )
        raise ForbiddenError(blog_id)
    return uow.blogs.remove(blog_id)
