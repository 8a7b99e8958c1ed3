"""Shared test data for the podcast integration test suite."""

from typing import Any

VALID_MANIFEST: dict[str, Any] = {
    "interview": "i.mp3",
    "introduction": "intro.mp3",
    "timestamp": 1000,
    "description": "d",
}
