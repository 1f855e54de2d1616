"""In-memory session store."""

from bloglist.domain.model import Session
from bloglist.interfaces.errors import DuplicateTokenError
from bloglist.interfaces.session_store import SessionStore

from .data import InMemoryData


class InMemorySessionStore(SessionStore):
    """SessionStore backed by `InMemoryData`."""

    def __init__(self, data: InMemoryData) -> None:
        self._data = data

    def add(self, session: Session) -> None:
        with self._data.sessions_lock:
            if session.token in self._data.sessions:
                raise DuplicateTokenError()
            self._data.sessions[session.token] = session

    def get(self, token: str) -> Session | None:
        with self._data.sessions_lock:
            return self._data.sessions.get(token)

    def remove(self, token: str) -> bool:
        with self._data.sessions_lock:
            return self._data.sessions.pop(token, None) is not None

    def clear(self) -> None:
        with self._data.sessions_lock:
            self._data.sessions.clear()
