"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bloglist.adapters.notification import InMemoryNotifier
from bloglist.service_layer import commands
from tests.helpers.fakes import FakeClock

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from bloglist.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def notifier() -> InMemoryNotifier:
    """Collects the events handlers publish."""
    return InMemoryNotifier()


@pytest.fixture
def clock() -> FakeClock:
    """A frozen clock."""
    return FakeClock()


@pytest.fixture
def bus(notifier: InMemoryNotifier, clock: FakeClock) -> MessageBus:
    """A message bus over a fresh in-memory unit of work."""
    return bootstrap_test_bus(notifier=notifier, clock=clock)


@pytest.fixture
def testuser_token(bus: MessageBus) -> str:
    """Register ``testuser`` and return a session token for them."""
    bus.handle(commands.RegisterUser(name="Test User", username="testuser", secret="pass123"))
    return bus.handle(commands.LogIn(username="testuser", secret="pass123"))


@pytest.fixture
def otheruser_token(bus: MessageBus) -> str:
    """Register ``otheruser`` and return a session token for them."""
    bus.handle(commands.RegisterUser(name="Other User", username="otheruser", secret="pass456"))
    return bus.handle(commands.LogIn(username="otheruser", secret="pass456"))
