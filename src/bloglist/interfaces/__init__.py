"""Interfaces (application boundary) for BLOGLIST.

Defines framework-free application contracts: the user, session and blog
stores, the unit of work, password hashing, id generation and notification
ports. Business rules stay out of this package.

Dependency rule: may import `bloglist.domain` models and events only. It may be
imported by `bloglist.service_layer`, `bloglist.adapters` and
`bloglist.bootstrap`.
"""
