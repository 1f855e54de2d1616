"""Ownership rule for destructive actions on blogs."""

from .model import Blog


def can_delete(caller_id: str | None, blog: Blog) -> bool:
    """Return True if `caller_id` owns `blog`.

    Anonymous callers (``None``) may never delete. The same predicate decides
    whether a delete action is offered to a caller in listings.
    """
    return caller_id is not None and caller_id == blog.owner_id
