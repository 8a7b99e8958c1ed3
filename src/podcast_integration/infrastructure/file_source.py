"""Directory-backed implementation of the FileSource interface."""

import logging
from pathlib import Path

from podcast_integration.domain import FileEvent
from podcast_integration.exceptions import DirectoryUnavailableError

from .interfaces import FileSource

logger = logging.getLogger(__name__)


class DirectoryFileSource(FileSource):
    """
    Lists a directory on every tick and emits files it has not emitted yet.

    A file is emitted once per version (name, size, modification time) for as
    long as it stays in the directory. Entries that disappear from a listing
    are forgotten, so a file that shows up again is treated as new.

    With `stable_ticks` > 0 a file is held back until it has been seen
    unchanged on that many previous ticks, which keeps files that are still
    being written out of the pipeline.
    """

    def __init__(self, directory: Path, stable_ticks: int = 0):
        self._directory = directory
        self._stable_ticks = stable_ticks
        self._emitted: dict[str, tuple[str, int, float]] = {}
        self._observed: dict[str, tuple[tuple[str, int, float], int]] = {}

    def ensure_directory(self) -> None:
        if self._directory.is_dir():
            return
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.exception(
                "Inbound directory creation failed",
                extra={"directory": str(self._directory)},
            )
            raise DirectoryUnavailableError(str(self._directory), e) from e
        logger.info(
            "Inbound directory created", extra={"directory": str(self._directory)}
        )

    def poll(self) -> list[FileEvent]:
        try:
            entries = sorted(self._directory.iterdir(), key=lambda entry: entry.name)
        except FileNotFoundError:
            self.ensure_directory()
            return []
        except OSError as e:
            raise DirectoryUnavailableError(str(self._directory), e) from e

        events = []
        present = set()
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                stat = entry.stat()
            except OSError as e:
                logger.debug(
                    "Skipped unreadable entry",
                    extra={"file_name": entry.name, "error": str(e)},
                )
                continue

            event = FileEvent(
                path=entry,
                name=entry.name,
                size=stat.st_size,
                modified_at=stat.st_mtime,
            )
            present.add(event.name)

            if self._emitted.get(event.name) == event.version:
                continue
            if not self._is_stable(event):
                continue

            self._emitted[event.name] = event.version
            events.append(event)

        self._forget_missing(present)

        if events:
            logger.info(
                "Files discovered",
                extra={"directory": str(self._directory), "count": len(events)},
            )
        return events

    def release(self, event: FileEvent) -> None:
        if self._emitted.get(event.name) == event.version:
            del self._emitted[event.name]

    def _is_stable(self, event: FileEvent) -> bool:
        """Counts consecutive unchanged sightings of a file version."""
        previous = self._observed.get(event.name)
        if previous and previous[0] == event.version:
            sightings = previous[1] + 1
        else:
            sightings = 0
        self._observed[event.name] = (event.version, sightings)
        return sightings >= self._stable_ticks

    def _forget_missing(self, present: set[str]) -> None:
        for name in list(self._emitted):
            if name not in present:
                del self._emitted[name]
        for name in list(self._observed):
            if name not in present:
                del self._observed[name]
