"""Users, sessions and blogs.

Read models (`User`, `Session`, `Blog`) are immutable snapshots handed out by
the stores. `BlogDraft` is the write model used to publish a new blog; the
store assigns the like counter and the creation ordinal.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .errors import ValidationError

MIN_USERNAME_LENGTH = 3
MIN_SECRET_LENGTH = 3

# also the SQL column sizes
MAX_NAME_LENGTH = 200
MAX_USERNAME_LENGTH = 100
MAX_TITLE_LENGTH = 300
MAX_AUTHOR_LENGTH = 200


def _require_text(field: str, value: str) -> str:
    if not (stripped := (value or "").strip()):
        raise ValidationError(field, "must not be empty")
    return stripped


def _limit(field: str, value: str, max_length: int) -> str:
    if len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value


def _require_utc(field: str, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() != timedelta(0):
        raise ValidationError(field, "must be timezone-aware UTC")


def validate_registration(name: str, username: str, secret: str) -> tuple[str, str]:
    """Check registration inputs and return the normalized ``(name, username)``.

    Raises:
        ValidationError: If the name is blank, the username or secret is
            shorter than three characters, or the name or username is too long.
    """
    name = _limit("name", _require_text("name", name), MAX_NAME_LENGTH)
    username = _limit(
        "username", _require_text("username", username), MAX_USERNAME_LENGTH
    )
    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(
            "username", f"must be at least {MIN_USERNAME_LENGTH} characters"
        )
    if len(secret or "") < MIN_SECRET_LENGTH:
        raise ValidationError(
            "password", f"must be at least {MIN_SECRET_LENGTH} characters"
        )
    return name, username


# --- Read Models ---


@dataclass(frozen=True, slots=True)
class User:
    """A registered account. Immutable once registered."""

    user_id: str
    name: str
    username: str
    secret_hash: str

    def __repr__(self) -> str:
        # keep the hash out of logs and tracebacks
        return f"User(user_id={self.user_id!r}, username={self.username!r})"


@dataclass(frozen=True, slots=True)
class Session:
    """An issued session credential bound to one user."""

    token: str
    user_id: str
    expires_at: datetime

    def __post_init__(self) -> None:
        _require_utc("expires_at", self.expires_at)

    def is_expired(self, now: datetime) -> bool:
        """Return True once `now` has reached the expiry instant."""
        return now >= self.expires_at

    def __repr__(self) -> str:
        return f"Session(user_id={self.user_id!r}, expires_at={self.expires_at!r})"


@dataclass(frozen=True, slots=True)
class Blog:
    """Immutable read model for a published blog.

    Conventions:
      - `owner_id` is the id of the user who created the blog; it never changes.
      - `author` is a free-text display label chosen at creation time.
      - `likes` is never negative.
      - `created_seq` orders blogs by creation (smaller is older).
    """

    blog_id: str
    owner_id: str
    title: str
    author: str
    url: str
    likes: int = 0
    created_seq: int = 0

    def __post_init__(self) -> None:
        if self.likes < 0:
            raise ValidationError("likes", "must not be negative")


# --- Write Models ---


@dataclass(frozen=True, slots=True)
class BlogDraft:
    """Write model for a blog about to be published."""

    blog_id: str
    owner_id: str
    title: str
    author: str
    url: str

    def __post_init__(self) -> None:
        title = _require_text("title", self.title)
        author = (self.author or "").strip()
        object.__setattr__(self, "title", _limit("title", title, MAX_TITLE_LENGTH))
        object.__setattr__(self, "url", _require_text("url", self.url))
        object.__setattr__(self, "author", _limit("author", author, MAX_AUTHOR_LENGTH))

    def to_blog(self, created_seq: int) -> Blog:
        """Return the freshly published blog, with no likes yet."""
        return Blog(
            blog_id=self.blog_id,
            owner_id=self.owner_id,
            title=self.title,
            author=self.author,
            url=self.url,
            likes=0,
            created_seq=created_seq,
        )
