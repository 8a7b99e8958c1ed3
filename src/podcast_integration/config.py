"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, Field


class TopologyConfig(BaseModel, frozen=True):
    """Exchange, queue and binding that production requests are routed through."""

    exchange_name: str = "podcast-requests-exchange"
    exchange_type: str = Field(default="topic", pattern=r"^(topic|direct)$")
    queue_name: str = "podcast-requests"
    routing_key: str = "podcast-requests"
    queue_type: str | None = None


class RabbitMQConfig(BaseModel, frozen=True):
    """RabbitMQ connection configuration."""

    host: str
    user: str
    password: str
    port: int = 5672
    virtual_host: str = "/"
    connection_attempts: int = Field(default=5, ge=1)
    retry_delay_seconds: float = Field(default=2.0, ge=0)
    topology: TopologyConfig = TopologyConfig()


class InboundConfig(BaseModel, frozen=True):
    """Watched directory configuration."""

    directory: Path
    extension: str = ".podcast"
    poll_interval_ms: int = Field(default=500, gt=0)
    stable_ticks: int = Field(default=0, ge=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    rabbitmq: RabbitMQConfig
    inbound: InboundConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        rabbitmq=RabbitMQConfig(
            host=os.getenv("RABBITMQ_HOST", "rabbitmq"),
            user=os.getenv("RABBITMQ_USER", ""),
            password=os.getenv("RABBITMQ_PASSWORD", ""),
            port=int(os.getenv("RABBITMQ_PORT", "5672")),
            virtual_host=os.getenv("RABBITMQ_VHOST", "/"),
            connection_attempts=int(os.getenv("RABBITMQ_CONNECTION_ATTEMPTS", "5")),
            retry_delay_seconds=float(os.getenv("RABBITMQ_RETRY_DELAY_SECONDS", "2")),
            topology=TopologyConfig(
                exchange_name=os.getenv(
                    "PODCAST_REQUESTS_EXCHANGE", "podcast-requests-exchange"
                ),
                exchange_type=os.getenv("PODCAST_REQUESTS_EXCHANGE_TYPE", "topic"),
                queue_name=os.getenv("PODCAST_REQUESTS_QUEUE", "podcast-requests"),
                routing_key=os.getenv(
                    "PODCAST_REQUESTS_ROUTING_KEY", "podcast-requests"
                ),
                queue_type=os.getenv("PODCAST_REQUESTS_QUEUE_TYPE") or None,
            ),
        ),
        inbound=InboundConfig(
            directory=Path(
                os.getenv("PODCAST_INBOUND_DIRECTORY", "/data/podcasts/inbound")
            ),
            poll_interval_ms=int(os.getenv("PODCAST_POLL_INTERVAL_MS", "500")),
            stable_ticks=int(os.getenv("PODCAST_STABLE_TICKS", "0")),
        ),
    )
