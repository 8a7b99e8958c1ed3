"""Message handlers."""

from .manifest_file_handler import ManifestFileHandler

__all__ = ["ManifestFileHandler"]
