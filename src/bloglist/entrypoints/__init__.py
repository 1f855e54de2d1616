"""Entrypoints (inbound adapters) for BLOGLIST.

Expose the application to the outside world. Parse and validate inputs, send
commands or run views through `bloglist.bootstrap`, and present results.

Dependency rule: may import `bloglist.bootstrap`, `bloglist.service_layer` and
`bloglist.domain`; avoid importing `bloglist.adapters` directly.
"""
