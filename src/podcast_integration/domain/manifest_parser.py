"""Decodes manifest file content."""

import logging

from pydantic import ValidationError

from podcast_integration.exceptions import ManifestParseError

from .models import Manifest

logger = logging.getLogger(__name__)


class ManifestParser:
    """Turns the JSON text of a manifest file into a Manifest."""

    def parse(self, content: str, file_name: str) -> Manifest:
        """
        Parses manifest content.

        Args:
            content: Full text content of the manifest file.
            file_name: Name of the file the content was read from.

        Returns:
            The decoded Manifest.

        Raises:
            ManifestParseError: If the content is not valid JSON, is not an
                object, or lacks a required field.
        """
        try:
            manifest = Manifest.model_validate_json(content)
        except ValidationError as e:
            raise ManifestParseError(file_name, self._describe(e), e) from e

        logger.debug("Manifest parsed", extra={"file_name": file_name})
        return manifest

    def _describe(self, error: ValidationError) -> str:
        """Condenses pydantic errors into a single log-friendly line."""
        parts = []
        for detail in error.errors():
            location = ".".join(str(item) for item in detail["loc"]) or "document"
            parts.append(f"{location}: {detail['msg']}")
        return "; ".join(parts)
