"""The ``bloglist`` command-line interface."""
