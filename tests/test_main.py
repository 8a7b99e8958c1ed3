"""Tests for the service entry point."""

import importlib
import logging
import signal
from types import ModuleType
from unittest.mock import MagicMock, patch

import pytest

from podcast_integration.exceptions import TopologyDeclarationError


@pytest.fixture
def main_module() -> ModuleType:
    with (
        patch("ddtrace.patch_all"),
        patch(
            "podcast_integration.logging.setup_logging",
            return_value=logging.getLogger(),
        ),
    ):
        return importlib.import_module("podcast_integration.main")


@pytest.fixture
def handlers(main_module: ModuleType, monkeypatch: pytest.MonkeyPatch) -> dict:
    registered = {}
    monkeypatch.setattr(
        main_module.signal,
        "signal",
        lambda signum, handler: registered.__setitem__(signum, handler),
    )
    return registered


def test_topology_failure_exits_before_polling(
    main_module: ModuleType, handlers: dict, monkeypatch: pytest.MonkeyPatch
) -> None:
    get_worker = MagicMock()
    monkeypatch.setattr(
        main_module,
        "get_broker",
        MagicMock(side_effect=TopologyDeclarationError("podcast-requests-exchange")),
    )
    monkeypatch.setattr(main_module, "get_worker", get_worker)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    get_worker.assert_not_called()
    assert handlers == {}


def test_sigterm_stops_worker_and_closes_broker(
    main_module: ModuleType, handlers: dict, monkeypatch: pytest.MonkeyPatch
) -> None:
    broker, worker = MagicMock(), MagicMock()
    worker.start.side_effect = lambda: handlers[signal.SIGTERM](signal.SIGTERM, None)
    monkeypatch.setattr(main_module, "get_broker", MagicMock(return_value=broker))
    monkeypatch.setattr(main_module, "get_worker", MagicMock(return_value=worker))

    main_module.main()

    assert set(handlers) == {signal.SIGTERM, signal.SIGINT}
    worker.stop.assert_called_once_with()
    broker.close.assert_called_once_with()


def test_broker_is_closed_when_worker_crashes(
    main_module: ModuleType, handlers: dict, monkeypatch: pytest.MonkeyPatch
) -> None:
    broker, worker = MagicMock(), MagicMock()
    worker.start.side_effect = RuntimeError("boom")
    monkeypatch.setattr(main_module, "get_broker", MagicMock(return_value=broker))
    monkeypatch.setattr(main_module, "get_worker", MagicMock(return_value=worker))

    with pytest.raises(RuntimeError):
        main_module.main()

    broker.close.assert_called_once_with()
