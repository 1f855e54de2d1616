"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable
from typing import Any

from bloglist.domain.errors import DomainError
from bloglist.interfaces.errors import StoreError
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Routes commands to their handlers.

    The bus is the main entrypoint to the write side of the service layer. It
    logs each dispatch, logs and re-raises handler failures, and returns
    whatever the handler returns (a new id, a session token, a like count...).

    Args:
        uow: The unit of work the handlers were wired with, exposed here for
            convenience.
        command_handlers: A mapping of command types to their handlers.
            Handlers take a single command argument; other dependencies must be
            bound beforehand (see `bloglist.bootstrap`).

    Note:
        The bus holds no per-call state, so one instance may serve concurrent
        callers as long as its unit of work does.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's result.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            DomainError | StoreError: If the handler rejects the command; logged
                at INFO without a traceback.
            Exception: If the handler fails unexpectedly; logged with traceback.
        """
        if not (handler := self._command_handlers.get(type(cmd))):
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            return handler(cmd)
        except (DomainError, StoreError) as e:
            logger.info("Command %s rejected: %s", type(cmd).__name__, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
