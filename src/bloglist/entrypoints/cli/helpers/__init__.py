"""CLI helpers for BLOGLIST.

Utilities used by the command-line interface: URL sanitization for safe
display, message emitters that write to stderr with emoji→ASCII fallbacks,
and access to the bootstrapped application.
"""

from .app import get_app, handle_errors
from .db_url import sanitize_url
from .messages import error, notify, success, warn

__all__ = [
    "error",
    "get_app",
    "handle_errors",
    "notify",
    "sanitize_url",
    "success",
    "warn",
]
