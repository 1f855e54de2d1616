"""In-memory stores.

Non-durable implementations of the store ports for tests, demos and the
`memory` backend. Every store is safe to share between threads; all stores of
one backend operate on a single shared `InMemoryData`.
"""

from .blogs import InMemoryBlogStore
from .data import InMemoryData
from .sessions import InMemorySessionStore
from .users import InMemoryUserStore

__all__ = [
    "InMemoryBlogStore",
    "InMemoryData",
    "InMemorySessionStore",
    "InMemoryUserStore",
]
