"""SQLAlchemy Core implementations of the store ports.

Each store works on a single `Connection` owned by the unit of work; none of
them commits.
"""

from .blogs import SqlAlchemyBlogStore
from .sessions import SqlAlchemySessionStore
from .users import SqlAlchemyUserStore

__all__ = ["SqlAlchemyBlogStore", "SqlAlchemySessionStore", "SqlAlchemyUserStore"]
