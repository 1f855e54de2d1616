"""Notifier implementations."""

import logging
import threading

from bloglist.domain import notices
from bloglist.domain.events import DomainEvent
from bloglist.interfaces.notifier import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Writes the acknowledgement for each event to the log."""

    def publish(self, event: DomainEvent) -> None:
        if (notice := notices.for_event(event)) is not None:
            logger.info("%s", notice.message)
        else:
            logger.debug("Event %s", event)


class InMemoryNotifier(Notifier):
    """Keeps every published event, in order. Safe to share between threads."""

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []
        self._lock = threading.Lock()

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[DomainEvent]:
        """A copy of the events published so far."""
        with self._lock:
            return list(self._events)
