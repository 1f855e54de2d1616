"""Interface for the notification collaborator.

Handlers publish domain events here once the corresponding change is
committed. Implementations decide how (or whether) to surface them.
"""

import abc

from bloglist.domain.events import DomainEvent

# pylint: disable=too-few-public-methods


class Notifier(abc.ABC):
    """Contract for receiving committed domain events."""

    @abc.abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Deliver a single event. Must not raise for unknown event types."""
