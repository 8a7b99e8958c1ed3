"""Worker that polls the inbound directory and orchestrates processing."""

import logging
import threading
import time

from podcast_integration.domain import FileState, ProcessingResult
from podcast_integration.exceptions import DirectoryUnavailableError
from podcast_integration.handlers import ManifestFileHandler
from podcast_integration.infrastructure.interfaces import FileSource

logger = logging.getLogger(__name__)


class Worker:
    """Runs the polling loop, one serial tick at a fixed rate."""

    def __init__(
        self,
        source: FileSource,
        handler: ManifestFileHandler,
        poll_interval_seconds: float = 0.5,
        initial_backoff_seconds: float = 1.0,
        max_backoff_seconds: float = 60.0,
    ):
        self._source = source
        self._handler = handler
        self._poll_interval = poll_interval_seconds
        self._initial_backoff = initial_backoff_seconds
        self._max_backoff = max_backoff_seconds
        self._stop_event = threading.Event()

    def start(self) -> None:
        """Polls until stop() is called. An in-flight tick always completes."""
        logger.info(
            "Worker initialized, starting directory polling",
            extra={"poll_interval_seconds": self._poll_interval},
        )
        self._wait_for_directory()

        next_tick = time.monotonic()
        while not self._stop_event.is_set():
            self.tick()

            next_tick += self._poll_interval
            delay = next_tick - time.monotonic()
            if delay < 0:
                # Tick overran the interval; start the next one right away.
                next_tick = time.monotonic()
                delay = 0
            self._stop_event.wait(delay)

        logger.info("Worker stopped")

    def stop(self) -> None:
        """Asks the polling loop to exit after the current tick."""
        self._stop_event.set()

    def tick(self) -> list[ProcessingResult]:
        """Lists the directory once and processes every new file in order."""
        try:
            events = self._source.poll()
        except DirectoryUnavailableError:
            logger.exception("Inbound directory listing failed")
            self._wait_for_directory()
            return []

        results = []
        for event in events:
            try:
                result = self._handler.process(event)
            except Exception:
                logger.exception(
                    "File processing failed", extra={"file_name": event.name}
                )
                result = ProcessingResult(
                    file_name=event.name, state=FileState.FAILED, retryable=True
                )
            if result.retryable:
                self._source.release(event)
            results.append(result)
        return results

    def _wait_for_directory(self) -> bool:
        """Retries directory creation with capped exponential backoff."""
        delay = self._initial_backoff
        while not self._stop_event.is_set():
            try:
                self._source.ensure_directory()
                return True
            except DirectoryUnavailableError as e:
                logger.error(
                    "Inbound directory unavailable, retrying",
                    extra={"directory": e.directory, "retry_in_seconds": delay},
                )
                self._stop_event.wait(delay)
                delay = min(delay * 2, self._max_backoff)
        return False
