"""Domain layer for BLOGLIST.

Contains business rules: users, sessions and blogs, the ranking order, the
ownership rule for deletion, domain events and domain errors. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `bloglist.adapters` or `bloglist.entrypoints`.
"""
