"""SessionStore on SQLAlchemy Core."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from bloglist.adapters.db.schema import sessions
from bloglist.domain.model import Session
from bloglist.interfaces.errors import DuplicateTokenError
from bloglist.interfaces.session_store import SessionStore

from ._inserts import insert_or_nothing

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


class SqlAlchemySessionStore(SessionStore):
    """Sessions in the ``sessions`` table, keyed by token."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, session: Session) -> None:
        stmt = insert_or_nothing(
            self.connection,
            sessions,
            {
                "token": session.token,
                "user_id": session.user_id,
                "expires_at": session.expires_at,
            },
        )
        if self.connection.execute(stmt).rowcount != 1:
            raise DuplicateTokenError()

    def get(self, token: str) -> Session | None:
        stmt = select(sessions.c.user_id, sessions.c.expires_at).where(
            sessions.c.token == token
        )
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return Session(token=token, user_id=row.user_id, expires_at=row.expires_at)

    def remove(self, token: str) -> bool:
        result = self.connection.execute(delete(sessions).where(sessions.c.token == token))
        return result.rowcount == 1

    def clear(self) -> None:
        self.connection.execute(delete(sessions))
