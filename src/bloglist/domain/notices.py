"""User-facing acknowledgements.

A `Notice` carries the text shown to a user and whether it reports a success
or an error. How a notice is styled is up to the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum

from . import events


class NoticeLevel(Enum):
    """Intent of a notice."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    """A message for the user together with its intent."""

    message: str
    level: NoticeLevel = NoticeLevel.SUCCESS


BLOG_REMOVED_MESSAGE = "Blog removed successfully"


def blog_added(title: str, author: str) -> Notice:
    """Acknowledge a freshly published blog."""
    return Notice(f'A new blog "{title}" by {author} added')


def blog_removed() -> Notice:
    """Acknowledge a deletion."""
    return Notice(BLOG_REMOVED_MESSAGE)


def for_event(event: events.DomainEvent) -> Notice | None:
    """Return the acknowledgement for an event, or None if it has none."""
    match event:
        case events.BlogCreated():
            return blog_added(event.title, event.author)
        case events.BlogDeleted():
            return blog_removed()
        case _:
            return None


def for_error(exc: Exception) -> Notice:
    """Return an error notice for a failure surfaced to the user."""
    return Notice(str(exc), NoticeLevel.ERROR)
