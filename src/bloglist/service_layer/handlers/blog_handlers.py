"""Handlers for publishing, liking and deleting blogs."""

import logging
from collections.abc import Callable

from bloglist.domain import events
from bloglist.domain.model import Blog, BlogDraft
from bloglist.interfaces.id_generator import IdGenerator
from bloglist.interfaces.notifier import Notifier
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork
from bloglist.service_layer import commands, sessions
from bloglist.service_layer.authorization import request_delete
from bloglist.service_layer.sessions import Clock

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments


def create_blog(
    cmd: commands.CreateBlog,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    notifier: Notifier,
    clock: Clock,
) -> Blog:
    """Publish a blog owned by the session's user."""
    with uow:
        owner_id = sessions.resolve(uow, cmd.token, clock=clock)
        draft = BlogDraft(
            blog_id=id_generator.new_id(),
            owner_id=owner_id,
            title=cmd.title,
            author=cmd.author,
            url=cmd.url,
        )
        blog = uow.blogs.add(draft)
        uow.commit()

    logger.info("User %s published blog %s", owner_id, blog.blog_id)
    notifier.publish(
        events.BlogCreated(
            blog_id=blog.blog_id,
            owner_id=owner_id,
            title=blog.title,
            author=blog.author,
        )
    )
    return blog


def like_blog(
    cmd: commands.LikeBlog, uow: AbstractUnitOfWork, notifier: Notifier
) -> int:
    """Add one like to a blog and return the new count."""
    with uow:
        likes = uow.blogs.increment_likes(cmd.blog_id)
        uow.commit()

    logger.debug("Blog %s now has %d likes", cmd.blog_id, likes)
    notifier.publish(events.BlogLiked(blog_id=cmd.blog_id, likes=likes))
    return likes


def delete_blog(
    cmd: commands.DeleteBlog,
    uow: AbstractUnitOfWork,
    notifier: Notifier,
    clock: Clock,
) -> Blog:
    """Delete a blog if the session's user owns it; return the removed blog."""
    with uow:
        caller_id = sessions.resolve(uow, cmd.token, clock=clock)
        blog = request_delete(uow, caller_id, cmd.blog_id)
        uow.commit()

    logger.info("User %s deleted blog %s", caller_id, blog.blog_id)
    notifier.publish(
        events.BlogDeleted(blog_id=blog.blog_id, owner_id=blog.owner_id, title=blog.title)
    )
    return blog


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateBlog: create_blog,
    commands.LikeBlog: like_blog,
    commands.DeleteBlog: delete_blog,
}
