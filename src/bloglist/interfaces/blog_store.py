"""Interface for the blog store, the system of record for blogs."""

from __future__ import annotations

import abc

from bloglist.domain.model import Blog, BlogDraft


class BlogStore(abc.ABC):
    """Blogs keyed by id, listed in creation order.

    Ownership is not checked here; callers must consult the authorization
    rule before calling `remove`.
    """

    @abc.abstractmethod
    def add(self, draft: BlogDraft) -> Blog:
        """Publish a new blog with zero likes.

        Returns:
            The stored blog, with its creation ordinal assigned.
        """

    @abc.abstractmethod
    def get(self, blog_id: str) -> Blog | None:
        """Return the blog with `blog_id`, or None if absent."""

    @abc.abstractmethod
    def list(self) -> list[Blog]:
        """Return a consistent snapshot of all blogs in creation order."""

    @abc.abstractmethod
    def increment_likes(self, blog_id: str) -> int:
        """Atomically add one like to a blog.

        Concurrent calls on the same blog must all be counted, and a call racing
        `remove` either lands before the removal or raises.

        Returns:
            The like count after the increment.

        Raises:
            BlogNotFoundError: If the blog does not exist.
        """

    @abc.abstractmethod
    def remove(self, blog_id: str) -> Blog:
        """Remove a blog.

        Returns:
            The blog as it was just before removal.

        Raises:
            BlogNotFoundError: If the blog does not exist.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every blog."""
