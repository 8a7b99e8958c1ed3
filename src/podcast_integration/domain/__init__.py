"""Domain layer containing business logic and models."""

from .file_validator import MANIFEST_EXTENSION, is_valid_podcast_file
from .manifest_parser import ManifestParser
from .models import (
    FileEvent,
    FileState,
    Manifest,
    Message,
    ProcessingResult,
    ProductionRequest,
)
from .request_transformer import RequestTransformer

__all__ = [
    "MANIFEST_EXTENSION",
    "is_valid_podcast_file",
    "ManifestParser",
    "RequestTransformer",
    "FileEvent",
    "FileState",
    "Manifest",
    "Message",
    "ProcessingResult",
    "ProductionRequest",
]
