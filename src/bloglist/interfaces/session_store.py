"""Interface for the store of issued session credentials."""

from __future__ import annotations

import abc

from bloglist.domain.model import Session


class SessionStore(abc.ABC):
    """Issued sessions keyed by their opaque token."""

    @abc.abstractmethod
    def add(self, session: Session) -> None:
        """Persist a newly issued session.

        Raises:
            DuplicateTokenError: If a session with the same token already exists.
        """

    @abc.abstractmethod
    def get(self, token: str) -> Session | None:
        """Return the session for `token`, or None if unknown."""

    @abc.abstractmethod
    def remove(self, token: str) -> bool:
        """Remove the session for `token`.

        Returns:
            True if a session was removed, False if none existed.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every session."""
