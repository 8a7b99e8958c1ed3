"""Abstract interfaces for message broker operations."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class MessagePublisher(ABC):
    """Abstract base class for publishing messages to a broker."""

    @abstractmethod
    def publish(
        self,
        routing_key: str,
        payload: dict,
        headers: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Publishes a message to the broker.

        Args:
            routing_key: The routing key for message routing.
            payload: The message data as a dictionary.
            headers: Message headers to attach.

        Raises:
            EventPublishError: If publishing fails.
        """


class MessageBroker(MessagePublisher, ABC):
    """Abstract base class for a publishing broker that owns its topology."""

    @abstractmethod
    def setup(self) -> None:
        """
        Declares the exchange, queue and binding. Safe to call repeatedly.

        Raises:
            TopologyDeclarationError: If the declaration fails.
        """

    @abstractmethod
    def close(self) -> None:
        """Closes the underlying connection."""
