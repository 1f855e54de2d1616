"""In-memory blog store.

Locking:
  - `InMemoryData.blogs_lock` guards the mapping itself (insert, lookup, drop)
    and is never held while waiting on a record lock.
  - `BlogRecord.lock` serializes likes and removal of one blog, so unrelated
    blogs never contend.
"""

from dataclasses import replace

from bloglist.domain.model import Blog, BlogDraft
from bloglist.interfaces.blog_store import BlogStore
from bloglist.interfaces.errors import BlogNotFoundError

from .data import BlogRecord, InMemoryData


class InMemoryBlogStore(BlogStore):
    """BlogStore backed by `InMemoryData`."""

    def __init__(self, data: InMemoryData) -> None:
        self._data = data

    def add(self, draft: BlogDraft) -> Blog:
        with self._data.blogs_lock:
            blog = draft.to_blog(created_seq=self._data.next_blog_seq)
            self._data.next_blog_seq += 1
            self._data.blogs[blog.blog_id] = BlogRecord(blog)
        return blog

    def get(self, blog_id: str) -> Blog | None:
        with self._data.blogs_lock:
            record = self._data.blogs.get(blog_id)
            return None if record is None else record.blog

    def list(self) -> list[Blog]:
        # snapshots are immutable, so copying references under the lock is enough
        with self._data.blogs_lock:
            return [record.blog for record in self._data.blogs.values()]

    def increment_likes(self, blog_id: str) -> int:
        record = self._record(blog_id)
        with record.lock:
            if record.removed:
                raise BlogNotFoundError(blog_id)
            record.blog = replace(record.blog, likes=record.blog.likes + 1)
            return record.blog.likes

    def remove(self, blog_id: str) -> Blog:
        with self._data.blogs_lock:
            if (record := self._data.blogs.pop(blog_id, None)) is None:
                raise BlogNotFoundError(blog_id)
        with record.lock:
            record.removed = True
            return record.blog

    def clear(self) -> None:
        with self._data.blogs_lock:
            records = list(self._data.blogs.values())
            self._data.blogs.clear()
        for record in records:
            with record.lock:
                record.removed = True

    def _record(self, blog_id: str) -> BlogRecord:
        with self._data.blogs_lock:
            if (record := self._data.blogs.get(blog_id)) is None:
                raise BlogNotFoundError(blog_id)
            return record
