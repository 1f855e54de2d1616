"""In-memory shared data for the in-memory stores."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from bloglist.domain.model import Blog, Session, User


@dataclass(slots=True)
class BlogRecord:
    """Mutable slot holding the current snapshot of one blog.

    `lock` serializes mutations of this blog only. Once `removed` is set the
    record is dead and every later mutation must fail.
    """

    blog: Blog
    lock: threading.Lock = field(default_factory=threading.Lock)
    removed: bool = False


@dataclass(slots=True)
class InMemoryData:
    """Shared backing data for the in-memory stores.

    A single instance should be passed to all in-memory stores so they see the
    same users, sessions and blogs. Each collection has its own lock, held only
    long enough to look up, insert or drop an entry.
    """

    # keyed by user_id, in registration order
    users: dict[str, User] = field(default_factory=dict)
    usernames: dict[str, str] = field(default_factory=dict)
    users_lock: threading.Lock = field(default_factory=threading.Lock)

    # keyed by token
    sessions: dict[str, Session] = field(default_factory=dict)
    sessions_lock: threading.Lock = field(default_factory=threading.Lock)

    # keyed by blog_id, in creation order
    blogs: dict[str, BlogRecord] = field(default_factory=dict)
    blogs_lock: threading.Lock = field(default_factory=threading.Lock)
    next_blog_seq: int = 1
