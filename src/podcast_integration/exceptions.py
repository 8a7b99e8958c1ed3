"""Custom exceptions for the podcast integration service."""


class DirectoryUnavailableError(Exception):
    """Raised when the watched directory is missing and cannot be created."""

    def __init__(self, directory: str, cause: Exception | None = None):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Inbound directory '{directory}' is unavailable")


class ManifestParseError(Exception):
    """Raised when a manifest file does not decode into a complete manifest."""

    def __init__(self, file_name: str, reason: str, cause: Exception | None = None):
        self.file_name = file_name
        self.reason = reason
        self.cause = cause
        super().__init__(f"Malformed manifest '{file_name}': {reason}")


class EventPublishError(Exception):
    """Raised when publishing an event to the message broker fails."""

    def __init__(self, routing_key: str, cause: Exception | None = None):
        self.routing_key = routing_key
        self.cause = cause
        super().__init__(f"Failed to publish event with routing key '{routing_key}'")


class TopologyDeclarationError(Exception):
    """Raised when the broker connection or topology declaration fails."""

    def __init__(self, exchange_name: str, cause: Exception | None = None):
        self.exchange_name = exchange_name
        self.cause = cause
        super().__init__(
            f"Failed to declare broker topology for exchange '{exchange_name}'"
        )
