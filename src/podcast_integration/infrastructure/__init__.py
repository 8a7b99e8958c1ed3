"""Infrastructure implementations."""

from .file_source import DirectoryFileSource
from .rabbitmq_broker import RabbitMQBroker

__all__ = ["DirectoryFileSource", "RabbitMQBroker"]
