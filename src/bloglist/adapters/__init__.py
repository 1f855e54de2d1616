"""Adapters (outbound implementations) for BLOGLIST.

Concrete implementations of the ports in `bloglist.interfaces`: in-memory and
SQLAlchemy-backed stores, units of work, id and token generators, password
hashing and notifiers.

Dependency rule: may import `bloglist.interfaces` and `bloglist.domain`; must
not import `bloglist.service_layer` or `bloglist.entrypoints`.
"""
