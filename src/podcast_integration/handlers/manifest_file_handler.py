"""Handler that carries one manifest file through the pipeline."""

import logging

from podcast_integration.domain import (
    MANIFEST_EXTENSION,
    FileEvent,
    FileState,
    ManifestParser,
    Message,
    ProcessingResult,
    RequestTransformer,
    is_valid_podcast_file,
)
from podcast_integration.exceptions import EventPublishError, ManifestParseError
from podcast_integration.infrastructure.interfaces import MessagePublisher

logger = logging.getLogger(__name__)


class ManifestFileHandler:
    """Validates, parses, transforms and publishes a single manifest file."""

    def __init__(
        self,
        publisher: MessagePublisher,
        routing_key: str,
        parser: ManifestParser | None = None,
        transformer: RequestTransformer | None = None,
        extension: str = MANIFEST_EXTENSION,
    ):
        self._publisher = publisher
        self._routing_key = routing_key
        self._parser = parser or ManifestParser()
        self._transformer = transformer or RequestTransformer()
        self._extension = extension

    def process(self, event: FileEvent) -> ProcessingResult:
        """
        Runs a discovered file through validate, parse, transform, publish.

        Each step only runs once the previous one succeeded. Failed publishes
        and unreadable files are marked retryable so the next tick tries them
        again. Rejected files and malformed manifests wait until they change.

        Args:
            event: The file discovered by the poller.

        Returns:
            ProcessingResult with the terminal state of the file.
        """
        state = FileState.DISCOVERED

        if not is_valid_podcast_file(event.path, self._extension):
            return self._result(event, FileState.REJECTED)
        state = FileState.VALIDATED

        try:
            raw = event.path.read_bytes()
        except FileNotFoundError:
            logger.debug("File vanished before read", extra={"file_name": event.name})
            return self._result(event, FileState.REJECTED, retryable=True)
        except OSError:
            logger.exception("Manifest read failed", extra={"file_name": event.name})
            return self._result(event, FileState.FAILED, retryable=True)

        message = Message(payload=raw, headers=event.headers())

        try:
            content = raw.decode("utf-8-sig")
            manifest = self._parser.parse(content, event.name)
        except UnicodeDecodeError as e:
            logger.error(
                "Manifest is not valid UTF-8",
                extra={"file_name": event.name, "error": str(e)},
            )
            return self._result(event, FileState.FAILED)
        except ManifestParseError as e:
            logger.error(
                "Malformed manifest skipped",
                extra={"file_name": e.file_name, "reason": e.reason},
            )
            return self._result(event, FileState.FAILED)
        state = FileState.PARSED

        request_message = self._transformer.transform(
            message.with_payload(manifest), event.name
        )
        state = FileState.TRANSFORMED

        try:
            self._publisher.publish(
                routing_key=self._routing_key,
                payload=request_message.payload.model_dump(by_alias=True),
                headers=request_message.headers,
            )
        except EventPublishError:
            logger.error(
                "Production request not published, will retry",
                extra={"file_name": event.name, "last_state": state.value},
            )
            return self._result(event, FileState.FAILED, retryable=True)

        logger.info(
            "Production request published",
            extra={"file_name": event.name, "routing_key": self._routing_key},
        )
        return self._result(event, FileState.PUBLISHED)

    def _result(
        self, event: FileEvent, state: FileState, retryable: bool = False
    ) -> ProcessingResult:
        return ProcessingResult(file_name=event.name, state=state, retryable=retryable)
