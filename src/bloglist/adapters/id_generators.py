"""ID and token generators for BLOGLIST."""

import secrets
import threading

from ulid import monotonic

from bloglist.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component. Used for user and blog ids.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class TokenGenerator(IdGenerator):
    """Unguessable URL-safe session tokens from the `secrets` module."""

    def __init__(self, nbytes: int = 32) -> None:
        self._nbytes = nbytes

    def new_id(self) -> str:
        return secrets.token_urlsafe(self._nbytes)


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential, zero-padded IDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, length: int = 26, prefix: str = "") -> None:
        self._counter = 0
        self._length = length
        self._prefix = prefix
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._prefix}{self._counter:0{self._length - len(self._prefix)}d}"
