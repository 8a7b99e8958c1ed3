from podcast_integration.config import (
    AppConfig,
    InboundConfig,
    RabbitMQConfig,
    TopologyConfig,
)
from podcast_integration.exceptions import (
    DirectoryUnavailableError,
    EventPublishError,
    ManifestParseError,
    TopologyDeclarationError,
)
from podcast_integration.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "InboundConfig",
    "RabbitMQConfig",
    "TopologyConfig",
    "DirectoryUnavailableError",
    "EventPublishError",
    "ManifestParseError",
    "TopologyDeclarationError",
]
