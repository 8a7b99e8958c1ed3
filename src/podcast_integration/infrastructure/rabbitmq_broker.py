"""RabbitMQ implementation of the MessageBroker interface."""

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

import pika
from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection
from pika.exceptions import AMQPChannelError, AMQPConnectionError, AMQPError

from podcast_integration.config import TopologyConfig
from podcast_integration.exceptions import EventPublishError, TopologyDeclarationError

from .interfaces import MessageBroker

logger = logging.getLogger(__name__)

PERSISTENT_DELIVERY_MODE = 2

ConnectionFactory = Callable[[], tuple[BlockingConnection, BlockingChannel]]


class RabbitMQBroker(MessageBroker):
    """Declares the request topology and publishes requests to RabbitMQ."""

    def __init__(
        self,
        connection: BlockingConnection,
        channel: BlockingChannel,
        topology: TopologyConfig,
        connect: ConnectionFactory | None = None,
    ):
        self._connection = connection
        self._channel = channel
        self._topology = topology
        self._connect = connect

    def publish(
        self,
        routing_key: str,
        payload: dict,
        headers: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Publishes a message to the configured exchange.

        The channel runs with publisher confirms, so a message the broker
        nacks or cannot route raises here instead of being dropped. A lost
        connection or closed channel is replaced before the error is raised,
        so the caller's next attempt goes out on a fresh channel.

        Args:
            routing_key: The routing key for message routing.
            payload: The message data as a dictionary.
            headers: Message headers to attach.

        Raises:
            EventPublishError: If publishing fails.
        """
        properties = pika.BasicProperties(
            content_type="application/json",
            delivery_mode=PERSISTENT_DELIVERY_MODE,
            headers=dict(headers) if headers else None,
        )
        try:
            self._channel.basic_publish(
                exchange=self._topology.exchange_name,
                routing_key=routing_key,
                body=json.dumps(payload),
                properties=properties,
                mandatory=True,
            )
        except Exception as e:
            logger.exception(
                "RabbitMQ publish failed",
                extra={
                    "exchange": self._topology.exchange_name,
                    "routing_key": routing_key,
                },
            )
            if isinstance(e, (AMQPConnectionError, AMQPChannelError)):
                self._reconnect()
            raise EventPublishError(routing_key, e) from e

        logger.info(
            "Event published to RabbitMQ",
            extra={
                "exchange": self._topology.exchange_name,
                "routing_key": routing_key,
            },
        )

    def setup(self) -> None:
        """Declares the exchange, queue and binding for production requests."""
        topology = self._topology
        arguments = None
        if topology.queue_type:
            arguments = {"x-queue-type": topology.queue_type}

        try:
            # Ensure exchange exists - idempotent
            self._channel.exchange_declare(
                exchange=topology.exchange_name,
                exchange_type=topology.exchange_type,
                durable=True,
            )
            # Ensure queue exists - idempotent
            self._channel.queue_declare(
                queue=topology.queue_name,
                durable=True,
                arguments=arguments,
            )
            # Bind queue to exchange with routing key - idempotent
            self._channel.queue_bind(
                queue=topology.queue_name,
                exchange=topology.exchange_name,
                routing_key=topology.routing_key,
            )
        except Exception as e:
            logger.exception(
                "RabbitMQ topology declaration failed",
                extra={
                    "exchange": topology.exchange_name,
                    "queue": topology.queue_name,
                    "routing_key": topology.routing_key,
                },
            )
            raise TopologyDeclarationError(topology.exchange_name, e) from e

        logger.info(
            "RabbitMQ infrastructure setup complete",
            extra={
                "exchange": topology.exchange_name,
                "queue": topology.queue_name,
                "routing_key": topology.routing_key,
            },
        )

    def close(self) -> None:
        if self._connection.is_open:
            self._connection.close()
            logger.info("RabbitMQ connection closed")

    def _reconnect(self) -> None:
        """Replaces a broken connection and declares the topology again."""
        if self._connect is None:
            return

        try:
            if self._connection.is_open:
                self._connection.close()
        except AMQPError:
            logger.debug("Closing broken RabbitMQ connection failed")

        try:
            self._connection, self._channel = self._connect()
            self.setup()
        except TopologyDeclarationError:
            logger.error(
                "RabbitMQ reconnect failed, will retry on next publish",
                extra={"exchange": self._topology.exchange_name},
            )
            return

        logger.info(
            "RabbitMQ connection re-established",
            extra={"exchange": self._topology.exchange_name},
        )
