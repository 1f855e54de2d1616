"""Alembic migration environment for BLOGLIST (see `bloglist.config.build_alembic_config`)."""
