"""Port for minting user ids, blog ids and session tokens.

User and blog ids are stored in fixed ``ENTITY_ID_LENGTH`` columns; session
tokens in a ``MAX_TOKEN_LENGTH`` column. The unit of work is shared between
threads, so one generator instance may be called concurrently.
"""

import abc

ENTITY_ID_LENGTH = 26
MAX_TOKEN_LENGTH = 128

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Source of fresh identifiers for users, blogs or sessions."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return a non-empty value never handed out before by this instance.

        Must be safe to call from several threads at once. Values must fit
        the column they are stored in: ``ENTITY_ID_LENGTH`` characters for
        user and blog ids, at most ``MAX_TOKEN_LENGTH`` for session tokens.
        """
