"""Relational schema for users, sessions and blogs.

Constraints (enforced here):

| Constraint                       | Purpose                                  |
|----------------------------------|------------------------------------------|
| UNIQUE(users.username)           | one account per username                 |
| UNIQUE(users.user_id)            | stable public id                         |
| UNIQUE(blogs.blog_id)            | stable public id                         |
| FK sessions.user_id -> users     | sessions belong to existing users        |
| FK blogs.owner_id -> users       | every blog has an owner                  |
| CHECK(likes >= 0)                | like counter never negative              |

`users.seq` and `blogs.seq` are surrogate, monotonically increasing keys used
to return rows in registration and creation order.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    String,
    Table,
    Text,
)

from bloglist.domain.model import (
    MAX_AUTHOR_LENGTH,
    MAX_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_USERNAME_LENGTH,
)
from bloglist.interfaces.id_generator import ENTITY_ID_LENGTH, MAX_TOKEN_LENGTH

from .metadata import metadata
from .sa_types import BIGINT_PK, UTCDateTime

__all__ = ["blogs", "sessions", "users"]

users = Table(
    "users",
    metadata,
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        primary_key=True,
        comment="Registration order.",
    ),
    Column("user_id", String(ENTITY_ID_LENGTH), nullable=False, unique=True),
    Column("name", String(MAX_NAME_LENGTH), nullable=False),
    Column("username", String(MAX_USERNAME_LENGTH), nullable=False, unique=True),
    Column(
        "secret_hash",
        String(255),
        nullable=False,
        comment="Salted password hash; never the secret itself.",
    ),
    comment="Registered accounts.",
)

sessions = Table(
    "sessions",
    metadata,
    Column(
        "token", String(MAX_TOKEN_LENGTH), primary_key=True, comment="Opaque session token."
    ),
    Column(
        "user_id",
        String(ENTITY_ID_LENGTH),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("expires_at", UTCDateTime(), nullable=False),
    Index(None, "user_id"),
    comment="Issued session credentials.",
)

blogs = Table(
    "blogs",
    metadata,
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        primary_key=True,
        comment="Creation order; breaks ranking ties.",
    ),
    Column("blog_id", String(ENTITY_ID_LENGTH), nullable=False, unique=True),
    Column(
        "owner_id",
        String(ENTITY_ID_LENGTH),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(MAX_TITLE_LENGTH), nullable=False),
    Column("author", String(MAX_AUTHOR_LENGTH), nullable=False, server_default=""),
    Column("url", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    CheckConstraint("likes >= 0", name="non_negative_likes"),
    Index(None, "owner_id"),
    comment="Published blogs.",
)
