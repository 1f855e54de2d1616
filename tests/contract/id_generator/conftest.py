"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from bloglist.adapters.id_generators import (
    SimpleIdGenerator,
    TokenGenerator,
    ULIDGenerator,
)
from bloglist.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "token", "simple"])
def id_generator(
    request: pytest.FixtureRequest,
) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"ulid"` → ULIDGenerator (user and blog ids)
      - `"token"` → TokenGenerator (session tokens)
      - `"simple"` → SimpleIdGenerator
    """

    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "token":
            yield TokenGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["ulid", "simple"])
def monotonic_id_generators(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield instances of IdGenerators that promise monotonic ID order."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown monotonic id generator type: {request.param}")
