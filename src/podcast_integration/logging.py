import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging():
    """
    Configures and sets up structured JSON logging for the application.

    This function initializes a JSON formatter that includes timestamp, level,
    logger name, message, trace_id, and span_id. It replaces the default
    handlers of the root logger and of the pika loggers with a single stream
    handler so that broker client output shares the same format.

    The level is read from the LOG_LEVEL environment variable (default INFO).
    pika is capped at WARNING since it is chatty at INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    level = os.getenv("LOG_LEVEL", "INFO").upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    pika_logger = logging.getLogger("pika")
    pika_logger.setLevel(logging.WARNING)
    pika_logger.handlers = []
    pika_logger.addHandler(stream_handler)
    pika_logger.propagate = False

    return root_logger
