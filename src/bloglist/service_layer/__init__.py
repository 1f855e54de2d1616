"""Service layer for BLOGLIST.

Implements application use-cases: command handlers, read-side views,
orchestration and transaction boundaries. Calls domain objects and the
outbound ports defined in `bloglist.interfaces`.

Dependency rule: may import `bloglist.domain` and `bloglist.interfaces`, but
not `bloglist.adapters` or `bloglist.entrypoints`.
"""
