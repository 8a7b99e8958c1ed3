"""Dependency injection configuration for the podcast integration service."""

from podcast_integration.config import AppConfig, load_config
from podcast_integration.exceptions import TopologyDeclarationError
from podcast_integration.handlers import ManifestFileHandler
from podcast_integration.infrastructure import DirectoryFileSource, RabbitMQBroker
from podcast_integration.infrastructure.interfaces import FileSource, MessageBroker
from podcast_integration.rabbitmq import get_rabbit_connection
from podcast_integration.worker import Worker

_config = load_config()


def _connect():
    return get_rabbit_connection(_config.rabbitmq)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_broker() -> MessageBroker:
    """
    Connects to RabbitMQ and declares the request topology.

    Raises:
        TopologyDeclarationError: If the broker is unreachable or refuses
            the declaration.
    """
    connection, channel = _connect()
    broker = RabbitMQBroker(
        connection, channel, _config.rabbitmq.topology, connect=_connect
    )
    try:
        broker.setup()
    except TopologyDeclarationError:
        broker.close()
        raise
    return broker


def get_file_source() -> FileSource:
    """Returns the inbound directory source."""
    return DirectoryFileSource(_config.inbound.directory, _config.inbound.stable_ticks)


def get_handler(broker: MessageBroker) -> ManifestFileHandler:
    """Returns the configured manifest file handler."""
    return ManifestFileHandler(
        broker,
        routing_key=_config.rabbitmq.topology.routing_key,
        extension=_config.inbound.extension,
    )


def get_worker(broker: MessageBroker) -> Worker:
    """Returns the configured worker."""
    return Worker(
        get_file_source(),
        get_handler(broker),
        poll_interval_seconds=_config.inbound.poll_interval_ms / 1000,
    )
