"""
Podcast Integration Service.

Watches the inbound directory for podcast manifests and republishes each one
as a production request. It handles:
- Polling the inbound directory and creating it when missing.
- Validating and parsing `.podcast` manifest files.
- Publishing production requests to a RabbitMQ exchange.
- Distributed tracing with Datadog.
- Structured JSON logging.
"""

import signal
import sys

from ddtrace import patch_all

from podcast_integration.dependencies import get_broker, get_config, get_worker
from podcast_integration.exceptions import TopologyDeclarationError
from podcast_integration.logging import setup_logging

patch_all()
logger = setup_logging()


def main():
    """Declares the broker topology, then starts the worker."""
    config = get_config()
    logger.info(
        "Starting podcast-integration service",
        extra={"directory": str(config.inbound.directory)},
    )

    try:
        broker = get_broker()
    except TopologyDeclarationError as e:
        logger.critical(
            "Broker topology unavailable, refusing to start",
            extra={"exchange": e.exchange_name},
        )
        sys.exit(1)

    worker = get_worker(broker)

    def _shutdown(signum, frame):
        logger.info("Shutdown requested", extra={"signal": signum})
        worker.stop()

    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)

    try:
        worker.start()
    finally:
        broker.close()


if __name__ == "__main__":
    main()
