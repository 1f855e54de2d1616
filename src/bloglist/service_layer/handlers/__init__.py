"""Service layer handlers."""

from collections.abc import Callable

from .admin_handlers import COMMAND_HANDLERS as ADMIN_COMMAND_HANDLERS
from .blog_handlers import COMMAND_HANDLERS as BLOG_COMMAND_HANDLERS
from .identity_handlers import COMMAND_HANDLERS as IDENTITY_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **IDENTITY_COMMAND_HANDLERS,
    **BLOG_COMMAND_HANDLERS,
    **ADMIN_COMMAND_HANDLERS,
}
