"""create bloglist tables

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 09:12:44.501233

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from bloglist.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(start=1),
            nullable=False,
            comment="Registration order.",
        ),
        sa.Column("user_id", sa.String(length=26), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column(
            "secret_hash",
            sa.String(length=255),
            nullable=False,
            comment="Salted password hash; never the secret itself.",
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_users")),
        sa.UniqueConstraint("user_id", name=op.f("uq_users_user_id")),
        sa.UniqueConstraint("username", name=op.f("uq_users_username")),
        comment="Registered accounts.",
    )

    op.create_table(
        "sessions",
        sa.Column(
            "token",
            sa.String(length=128),
            nullable=False,
            comment="Opaque session token.",
        ),
        sa.Column("user_id", sa.String(length=26), nullable=False),
        sa.Column("expires_at", UTCDateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.user_id"],
            name=op.f("fk_sessions_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("token", name=op.f("pk_sessions")),
        comment="Issued session credentials.",
    )
    op.create_index(op.f("ix_sessions_user_id"), "sessions", ["user_id"])

    op.create_table(
        "blogs",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(start=1),
            nullable=False,
            comment="Creation order; breaks ranking ties.",
        ),
        sa.Column("blog_id", sa.String(length=26), nullable=False),
        sa.Column("owner_id", sa.String(length=26), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("author", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("likes >= 0", name=op.f("ck_blogs_non_negative_likes")),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.user_id"],
            name=op.f("fk_blogs_owner_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_blogs")),
        sa.UniqueConstraint("blog_id", name=op.f("uq_blogs_blog_id")),
        comment="Published blogs.",
    )
    op.create_index(op.f("ix_blogs_owner_id"), "blogs", ["owner_id"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_blogs_owner_id"), table_name="blogs")
    op.drop_table("blogs")
    op.drop_index(op.f("ix_sessions_user_id"), table_name="sessions")
    op.drop_table("sessions")
    op.drop_table("users")
