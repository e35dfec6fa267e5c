from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from watchlistpy.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    httpx_level = logging.getLogger("httpx").level
    yield None
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


@pytest.mark.usefixtures("restore_root_logger")
def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATCHLISTPY_LOG_LEVEL", "debug")

    configure_logging(force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATCHLISTPY_LOG_LEVEL", "chatty")

    configure_logging(force=True)

    assert logging.getLogger().level == logging.INFO
