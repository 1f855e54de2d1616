"""Events"""

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the record the event is about.
    """

    @property
    @abc.abstractmethod
    def subject_id(self) -> str:
        """Return the ID of the user or blog this event belongs to."""


@dataclass(frozen=True, slots=True)
class UserRegistered(DomainEvent):
    """Event indicating that a new user account has been registered."""

    user_id: str
    username: str

    @property
    def subject_id(self) -> str:
        return self.user_id


@dataclass(frozen=True, slots=True)
class BlogCreated(DomainEvent):
    """Event indicating that a blog has been published."""

    blog_id: str
    owner_id: str
    title: str
    author: str

    @property
    def subject_id(self) -> str:
        return self.blog_id


@dataclass(frozen=True, slots=True)
class BlogLiked(DomainEvent):
    """Event indicating that a blog received a like."""

    blog_id: str
    likes: int

    @property
    def subject_id(self) -> str:
        return self.blog_id


@dataclass(frozen=True, slots=True)
class BlogDeleted(DomainEvent):
    """Event indicating that a blog has been removed by its owner."""

    blog_id: str
    owner_id: str
    title: str

    @property
    def subject_id(self) -> str:
        return self.blog_id
