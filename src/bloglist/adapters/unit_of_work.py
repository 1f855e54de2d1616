"""Units of work for BLOGLIST.

`SqlAlchemyUnitOfWork` wraps one database transaction per ``with`` block.
`InMemoryUnitOfWork` exposes the in-memory stores, whose writes apply
immediately; its ``rollback`` cannot undo them.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from bloglist.interfaces.unit_of_work import AbstractUnitOfWork

from .memory import (
    InMemoryBlogStore,
    InMemoryData,
    InMemorySessionStore,
    InMemoryUserStore,
)
from .sqlalchemy_stores import (
    SqlAlchemyBlogStore,
    SqlAlchemySessionStore,
    SqlAlchemyUserStore,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from bloglist.interfaces.blog_store import BlogStore
    from bloglist.interfaces.session_store import SessionStore
    from bloglist.interfaces.user_store import UserStore


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed unit of work.

    One instance may be shared by many threads: each thread entering the
    unit of work gets its own connection and stores.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._local = threading.local()

    def __enter__(self):
        connection = self.engine.connect()
        self._local.connection = connection
        self._local.users = SqlAlchemyUserStore(connection)
        self._local.sessions = SqlAlchemySessionStore(connection)
        self._local.blogs = SqlAlchemyBlogStore(connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()
            self._local.__dict__.clear()

    @property
    def connection(self) -> Connection:
        """The connection of the calling thread's open unit of work."""
        return self._local.connection

    @property
    def users(self) -> UserStore:  # type: ignore[override]
        return self._local.users

    @property
    def sessions(self) -> SessionStore:  # type: ignore[override]
        return self._local.sessions

    @property
    def blogs(self) -> BlogStore:  # type: ignore[override]
        return self._local.blogs

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of work over shared `InMemoryData`.

    Safe to share between threads; the stores do their own locking.
    """

    def __init__(self, data: InMemoryData | None = None):
        self.data = data if data is not None else InMemoryData()
        self.users = InMemoryUserStore(self.data)
        self.sessions = InMemorySessionStore(self.data)
        self.blogs = InMemoryBlogStore(self.data)

    def commit(self):
        pass

    def rollback(self):
        pass
