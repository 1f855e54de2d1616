"""Administrative handlers (test and operations use only)."""

import logging
from collections.abc import Callable

from bloglist.interfaces.unit_of_work import AbstractUnitOfWork
from bloglist.service_layer import commands

logger = logging.getLogger(__name__)


def reset_state(cmd: commands.ResetState, uow: AbstractUnitOfWork) -> None:  # pylint: disable=unused-argument
    """Remove every session, blog and user."""
    with uow:
        # sessions and blogs reference users
        uow.sessions.clear()
        uow.blogs.clear()
        uow.users.clear()
        uow.commit()

    logger.warning("All users, sessions and blogs have been removed")


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.ResetState: reset_state,
}
