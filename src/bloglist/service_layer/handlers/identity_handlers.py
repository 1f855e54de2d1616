"""Handlers for registration, login and logout."""

import logging
from collections.abc import Callable

from bloglist.domain import events
from bloglist.interfaces.id_generator import IdGenerator
from bloglist.interfaces.notifier import Notifier
from bloglist.interfaces.password_hasher import PasswordHasher
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork
from bloglist.service_layer import commands, identity, sessions
from bloglist.service_layer.sessions import Clock

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments


def register_user(
    cmd: commands.RegisterUser,
    uow: AbstractUnitOfWork,
    hasher: PasswordHasher,
    id_generator: IdGenerator,
    notifier: Notifier,
) -> str:
    """Register a new user and return their id."""
    with uow:
        user = identity.register(
            uow,
            hasher,
            id_generator,
            name=cmd.name,
            username=cmd.username,
            secret=cmd.secret,
        )
        uow.commit()

    logger.info("Registered user %s (%s)", user.username, user.user_id)
    notifier.publish(events.UserRegistered(user_id=user.user_id, username=user.username))
    return user.user_id


def log_in(
    cmd: commands.LogIn,
    uow: AbstractUnitOfWork,
    hasher: PasswordHasher,
    token_generator: IdGenerator,
    clock: Clock,
    session_ttl: int,
) -> str:
    """Authenticate a user and return a new session token."""
    with uow:
        user = identity.authenticate(uow, hasher, cmd.username, cmd.secret)
        session = sessions.issue(
            uow, user.user_id, token_generator, clock=clock, ttl_seconds=session_ttl
        )
        uow.commit()

    logger.info("User %s logged in", user.username)
    return session.token


def log_out(cmd: commands.LogOut, uow: AbstractUnitOfWork) -> None:
    """End a session; ending an unknown session is not an error."""
    with uow:
        if sessions.revoke(uow, cmd.token):
            uow.commit()
            logger.debug("Session revoked")
        else:
            logger.debug("LogOut: no such session; noop")


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.RegisterUser: register_user,
    commands.LogIn: log_in,
    commands.LogOut: log_out,
}
