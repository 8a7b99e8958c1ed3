"""Abstract interface for polled file sources."""

from abc import ABC, abstractmethod

from podcast_integration.domain import FileEvent


class FileSource(ABC):
    """Abstract base class for sources that emit discovered files per tick."""

    @abstractmethod
    def ensure_directory(self) -> None:
        """
        Creates the watched directory if it does not exist.

        Raises:
            DirectoryUnavailableError: If the directory cannot be created.
        """

    @abstractmethod
    def poll(self) -> list[FileEvent]:
        """
        Lists files that have not been emitted yet.

        Raises:
            DirectoryUnavailableError: If the directory cannot be listed.
        """

    @abstractmethod
    def release(self, event: FileEvent) -> None:
        """Forgets an emitted file so the next tick evaluates it again."""
