"""Bootstrap the message bus with handlers, unit of work and adapters."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bloglist import config
from bloglist.adapters.db.engine import make_engine
from bloglist.adapters.id_generators import TokenGenerator, ULIDGenerator
from bloglist.adapters.notification import LoggingNotifier
from bloglist.adapters.password_hasher import WerkzeugPasswordHasher
from bloglist.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from bloglist.service_layer.handlers import COMMAND_HANDLERS
from bloglist.service_layer.messagebus import MessageBus
from bloglist.service_layer.sessions import Clock, utc_now

if TYPE_CHECKING:
    from bloglist.interfaces.id_generator import IdGenerator
    from bloglist.interfaces.notifier import Notifier
    from bloglist.interfaces.password_hasher import PasswordHasher
    from bloglist.interfaces.unit_of_work import AbstractUnitOfWork
    from bloglist.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Everything an entrypoint needs: the bus for commands, the unit of work
    for views, and the clock both sides agree on."""

    message_bus: MessageBus
    uow: AbstractUnitOfWork
    clock: Clock = utc_now


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build the unit of work for `url` (``memory`` selects the in-memory backend)."""
    if url == config.MEMORY_URL:
        return InMemoryUnitOfWork()
    return SqlAlchemyUnitOfWork(make_engine(url))


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., Any]],
    dependencies: Mapping[str, object],
) -> MessageBus:
    """Build a message bus whose handlers have their dependencies bound."""
    dependencies = {"uow": uow, **dependencies}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(uow, command_handlers=injected_command_handlers)


def bootstrap(  # pylint: disable=too-many-arguments
    url: str | None = None,
    *,
    uow: AbstractUnitOfWork | None = None,
    id_generator: IdGenerator | None = None,
    token_generator: IdGenerator | None = None,
    hasher: PasswordHasher | None = None,
    notifier: Notifier | None = None,
    clock: Clock = utc_now,
    session_ttl: int | None = None,
) -> AppContainer:
    """Wire the application.

    Args:
        url: Database URL; defaults to ``BLOGLIST_DB_URL``. Ignored when `uow`
            is given.
        uow: A ready unit of work, mostly for tests.
        id_generator: Generator for user and blog ids (ULIDs by default).
        token_generator: Generator for session tokens.
        hasher: Password hasher (Werkzeug scrypt by default).
        notifier: Where domain events go; logged by default.
        clock: Source of the current UTC time.
        session_ttl: Session lifetime in seconds; defaults to
            ``BLOGLIST_SESSION_TTL``.

    Returns:
        The wired `AppContainer`.
    """
    if uow is None:
        url = url or config.get_db_url()
        uow = build_uow(url)
    dependencies = {
        "id_generator": id_generator or ULIDGenerator(),
        "token_generator": token_generator or TokenGenerator(),
        "hasher": hasher or WerkzeugPasswordHasher(),
        "notifier": notifier if notifier is not None else LoggingNotifier(),
        "clock": clock,
        "session_ttl": session_ttl if session_ttl is not None else config.get_session_ttl(),
    }
    logger.debug(
        "Bootstrapped %s with %s",
        type(uow).__name__,
        {name: type(dep).__name__ for name, dep in dependencies.items()},
    )

    return AppContainer(
        message_bus=build_message_bus(uow, COMMAND_HANDLERS, dependencies),
        uow=uow,
        clock=clock,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler asks for by parameter name."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
