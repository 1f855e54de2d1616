"""UserStore on SQLAlchemy Core."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from bloglist.adapters.db.schema import users
from bloglist.domain.model import User
from bloglist.interfaces.errors import DuplicateUsernameError
from bloglist.interfaces.user_store import UserStore

from ._inserts import insert_or_nothing

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row

_COLUMNS = (users.c.user_id, users.c.name, users.c.username, users.c.secret_hash)


def _to_user(row: Row) -> User:
    return User(
        user_id=row.user_id,
        name=row.name,
        username=row.username,
        secret_hash=row.secret_hash,
    )


class SqlAlchemyUserStore(UserStore):
    """Users in the ``users`` table; uniqueness is enforced by the database."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, user: User) -> None:
        stmt = insert_or_nothing(
            self.connection,
            users,
            {
                "user_id": user.user_id,
                "name": user.name,
                "username": user.username,
                "secret_hash": user.secret_hash,
            },
        )
        if self.connection.execute(stmt).rowcount == 1:
            return
        if self.get_by_username(user.username) is not None:
            raise DuplicateUsernameError(user.username)
        # only a user_id collision is left
        raise RuntimeError(f"user_id {user.user_id} is already registered")

    def get(self, user_id: str) -> User | None:
        stmt = select(*_COLUMNS).where(users.c.user_id == user_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return _to_user(row)

    def get_by_username(self, username: str) -> User | None:
        stmt = select(*_COLUMNS).where(users.c.username == username)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return _to_user(row)

    def list(self) -> list[User]:
        stmt = select(*_COLUMNS).order_by(users.c.seq)
        return [_to_user(row) for row in self.connection.execute(stmt)]

    def clear(self) -> None:
        self.connection.execute(delete(users))
