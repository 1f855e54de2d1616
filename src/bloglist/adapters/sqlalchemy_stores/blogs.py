"""BlogStore on SQLAlchemy Core.

Likes and removal are single statements (``UPDATE ... RETURNING`` and
``DELETE ... RETURNING``), so the database serializes them per row: a like
that loses a race with a removal matches no row and reports the blog missing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from bloglist.adapters.db.schema import blogs
from bloglist.domain.model import Blog, BlogDraft
from bloglist.interfaces.blog_store import BlogStore
from bloglist.interfaces.errors import BlogNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row

_COLUMNS = (
    blogs.c.seq,
    blogs.c.blog_id,
    blogs.c.owner_id,
    blogs.c.title,
    blogs.c.author,
    blogs.c.url,
    blogs.c.likes,
)


def _to_blog(row: Row) -> Blog:
    return Blog(
        blog_id=row.blog_id,
        owner_id=row.owner_id,
        title=row.title,
        author=row.author,
        url=row.url,
        likes=int(row.likes),
        created_seq=int(row.seq),
    )


class SqlAlchemyBlogStore(BlogStore):
    """Blogs in the ``blogs`` table, ordered by their ``seq`` key."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, draft: BlogDraft) -> Blog:
        result = self.connection.execute(
            insert(blogs).values(
                blog_id=draft.blog_id,
                owner_id=draft.owner_id,
                title=draft.title,
                author=draft.author,
                url=draft.url,
                likes=0,
            )
        )
        return draft.to_blog(created_seq=int(result.inserted_primary_key[0]))

    def get(self, blog_id: str) -> Blog | None:
        stmt = select(*_COLUMNS).where(blogs.c.blog_id == blog_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return _to_blog(row)

    def list(self) -> list[Blog]:
        stmt = select(*_COLUMNS).order_by(blogs.c.seq)
        return [_to_blog(row) for row in self.connection.execute(stmt)]

    def increment_likes(self, blog_id: str) -> int:
        stmt = (
            update(blogs)
            .where(blogs.c.blog_id == blog_id)
            .values(likes=blogs.c.likes + 1)
            .returning(blogs.c.likes)
        )
        if (likes := self.connection.execute(stmt).scalar_one_or_none()) is None:
            raise BlogNotFoundError(blog_id)
        return int(likes)

    def remove(self, blog_id: str) -> Blog:
        stmt = delete(blogs).where(blogs.c.blog_id == blog_id).returning(*_COLUMNS)
        if not (row := self.connection.execute(stmt).fetchone()):
            raise BlogNotFoundError(blog_id)
        return _to_blog(row)

    def clear(self) -> None:
        self.connection.execute(delete(blogs))
