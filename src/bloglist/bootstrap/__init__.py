"""Bootstrap (composition root) for BLOGLIST.

Assembles the application at runtime: picks the storage backend from
configuration, wires concrete adapters into the service-layer handlers and
hands entrypoints a ready `AppContainer`.

Import rules:
- Entry points import *this* package rather than reaching into adapters.
- This package may import: `bloglist.adapters`, `bloglist.service_layer`,
  `bloglist.interfaces`, `bloglist.domain`, and `bloglist.config`.
- Inner layers must not import `bloglist.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus, build_uow

__all__ = ["AppContainer", "bootstrap", "build_message_bus", "build_uow"]
