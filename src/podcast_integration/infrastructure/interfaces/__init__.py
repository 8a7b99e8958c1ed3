"""Abstract interfaces for infrastructure dependencies."""

from .file_source import FileSource
from .message_broker import MessageBroker, MessagePublisher

__all__ = ["FileSource", "MessageBroker", "MessagePublisher"]
