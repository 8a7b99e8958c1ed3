"""
tests/conftest.py

Shared fixtures for the podcast integration test suite. No broker is needed:
pika channels are replaced by MagicMock instances and the inbound directory
lives under pytest's tmp_path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from podcast_integration.config import TopologyConfig
from podcast_integration.infrastructure import DirectoryFileSource, RabbitMQBroker
from tests.helpers import VALID_MANIFEST


@pytest.fixture
def topology() -> TopologyConfig:
    return TopologyConfig(
        exchange_name="podcast-requests-exchange",
        exchange_type="topic",
        queue_name="podcast-requests",
        routing_key="podcast-requests",
    )


@pytest.fixture
def channel() -> MagicMock:
    return MagicMock()


@pytest.fixture
def connection() -> MagicMock:
    conn = MagicMock()
    conn.is_open = True
    return conn


@pytest.fixture
def broker(connection: MagicMock, channel: MagicMock, topology: TopologyConfig) -> RabbitMQBroker:
    return RabbitMQBroker(connection, channel, topology)


@pytest.fixture
def inbound_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "inbound"
    directory.mkdir()
    return directory


@pytest.fixture
def file_source(inbound_dir: Path) -> DirectoryFileSource:
    return DirectoryFileSource(inbound_dir)


@pytest.fixture
def write_manifest(inbound_dir: Path) -> Callable[..., Path]:
    """Writes a manifest file into the inbound directory."""

    def _write(name: str, content: dict[str, Any] | str | None = None) -> Path:
        if content is None:
            content = VALID_MANIFEST
        text = content if isinstance(content, str) else json.dumps(content)
        path = inbound_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
