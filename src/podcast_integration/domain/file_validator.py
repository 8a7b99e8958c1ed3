"""Filters inbound directory entries down to manifest files."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_EXTENSION = ".podcast"


def is_valid_podcast_file(
    path: Path | None, extension: str = MANIFEST_EXTENSION
) -> bool:
    """
    Checks whether a directory entry is a manifest ready to be processed.

    An entry passes when it is a regular file, is not empty and its name ends
    with `extension` (case-insensitive). Anything else is expected noise such
    as partial writes or unrelated files, so rejections are only logged at
    debug level.

    Args:
        path: The directory entry to check.
        extension: The manifest file extension.

    Returns:
        True if the entry should be parsed and published.
    """
    if path is None:
        return False

    if not path.name.lower().endswith(extension.lower()):
        logger.debug("Rejected file: extension", extra={"file_name": path.name})
        return False

    try:
        if not path.is_file():
            logger.debug("Rejected file: not a file", extra={"file_name": path.name})
            return False
        size = path.stat().st_size
    except OSError:
        logger.debug("Rejected file: unreadable", extra={"file_name": path.name})
        return False

    if size <= 0:
        logger.debug("Rejected file: empty", extra={"file_name": path.name})
        return False

    return True
