import logging

import pika

from podcast_integration.config import RabbitMQConfig
from podcast_integration.exceptions import TopologyDeclarationError

logger = logging.getLogger(__name__)


def get_rabbit_connection(config: RabbitMQConfig):
    """
    Establishes a new blocking connection to RabbitMQ and returns a channel.

    pika retries the initial connection itself (connection_attempts,
    retry_delay). The channel is put in publisher-confirm mode so every
    basic_publish blocks until the broker has taken responsibility for the
    message.

    Args:
        config (RabbitMQConfig): Connection settings.

    Returns:
        tuple: (connection, channel)

    Raises:
        TopologyDeclarationError: If the broker cannot be reached.
    """
    credentials = pika.PlainCredentials(config.user, config.password)
    parameters = pika.ConnectionParameters(
        host=config.host,
        port=config.port,
        virtual_host=config.virtual_host,
        credentials=credentials,
        heartbeat=0,
        connection_attempts=config.connection_attempts,
        retry_delay=config.retry_delay_seconds,
    )

    try:
        connection = pika.BlockingConnection(parameters)
        channel = connection.channel()
        channel.confirm_delivery()
    except Exception as e:
        logger.exception(
            "Failed to connect to RabbitMQ",
            extra={"host": config.host, "username": config.user},
        )
        raise TopologyDeclarationError(config.topology.exchange_name, e) from e

    logger.info(
        "Connected to RabbitMQ",
        extra={"host": config.host, "virtual_host": config.virtual_host},
    )
    return connection, channel
