"""Interface for one-way hashing of user secrets."""

import abc


class PasswordHasher(abc.ABC):
    """Contract for hashing and verifying user secrets."""

    @abc.abstractmethod
    def hash(self, secret: str) -> str:
        """Return a salted, one-way hash of `secret` suitable for storage."""

    @abc.abstractmethod
    def verify(self, secret_hash: str, secret: str) -> bool:
        """Return True if `secret` matches the stored `secret_hash`."""
