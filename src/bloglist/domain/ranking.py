"""Ordering of blogs by popularity."""

from collections.abc import Iterable

from .model import Blog


def rank_by_likes(blogs: Iterable[Blog]) -> list[Blog]:
    """Return `blogs` sorted by like count, most liked first.

    The sort is stable: blogs with equal likes keep the order they had in
    `blogs` (creation order when fed from a blog store listing).
    """
    return sorted(blogs, key=lambda blog: blog.likes, reverse=True)
