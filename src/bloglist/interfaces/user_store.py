"""Interface for the store of registered users."""

from __future__ import annotations

import abc

from bloglist.domain.model import User


class UserStore(abc.ABC):
    """Registered users, keyed by id and by unique username."""

    @abc.abstractmethod
    def add(self, user: User) -> None:
        """Persist a newly registered user.

        Args:
            user: The user to add.

        Raises:
            DuplicateUsernameError: If the username is already registered.
        """

    @abc.abstractmethod
    def get(self, user_id: str) -> User | None:
        """Return the user with `user_id`, or None if unknown."""

    @abc.abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return the user registered as `username`, or None if unknown.

        Note:
            Usernames are compared exactly (case-sensitive).
        """

    @abc.abstractmethod
    def list(self) -> list[User]:
        """Return all users in registration order."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every user."""
