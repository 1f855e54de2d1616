"""In-memory user store."""

from bloglist.domain.model import User
from bloglist.interfaces.errors import DuplicateUsernameError
from bloglist.interfaces.user_store import UserStore

from .data import InMemoryData


class InMemoryUserStore(UserStore):
    """UserStore backed by `InMemoryData`."""

    def __init__(self, data: InMemoryData) -> None:
        self._data = data

    def add(self, user: User) -> None:
        with self._data.users_lock:
            if user.username in self._data.usernames:
                raise DuplicateUsernameError(user.username)
            self._data.users[user.user_id] = user
            self._data.usernames[user.username] = user.user_id

    def get(self, user_id: str) -> User | None:
        with self._data.users_lock:
            return self._data.users.get(user_id)

    def get_by_username(self, username: str) -> User | None:
        with self._data.users_lock:
            if (user_id := self._data.usernames.get(username)) is None:
                return None
            return self._data.users[user_id]

    def list(self) -> list[User]:
        with self._data.users_lock:
            return list(self._data.users.values())

    def clear(self) -> None:
        with self._data.users_lock:
            self._data.users.clear()
            self._data.usernames.clear()
