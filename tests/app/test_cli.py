from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from watchlistpy.config import MissingConfigurationError
from watchlistpy.domain.errors import AmbiguousMatchError, NotFoundError
from watchlistpy.domain.model import Format, WatchStatus
from watchlistpy.domain.reconciliation import SyncOutcome, SyncResult, TitleSyncReport
from watchlistpy.ui import cli

from tests.helpers.watchlist import make_gravity_item, make_record

if TYPE_CHECKING:
    from watchlistpy.domain.model import Record


def _created(title: str) -> TitleSyncReport:
    record = make_record("page-1", title, external_id="49526", format_=Format.MOVIE)
    result = SyncResult(outcome=SyncOutcome.CREATED, record=record, item=make_gravity_item())
    return TitleSyncReport(title=title, result=result)


def test_sync_passes_every_title(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[list[str]] = []

    def fake_sync(titles: list[str]) -> list[TitleSyncReport]:
        captured.append(list(titles))
        return [_created(title) for title in titles]

    monkeypatch.setattr(cli, "sync_titles", fake_sync)

    cli.main(["sync", "Gravity", "Breaking Bad"])

    assert captured == [["Gravity", "Breaking Bad"]]


def test_sync_exits_non_zero_when_a_title_fails(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def fake_sync(titles: list[str]) -> list[TitleSyncReport]:
        return [_created("Gravity"), TitleSyncReport(title="zzzz", error=NotFoundError("zzzz"))]

    monkeypatch.setattr(cli, "sync_titles", fake_sync)

    with caplog.at_level(logging.INFO), pytest.raises(SystemExit) as excinfo:
        cli.main(["sync", "Gravity", "zzzz"])

    assert excinfo.value.code == 1
    assert 'No catalog results found for "zzzz"' in caplog.text
    assert "Gravity: created" in caplog.text


def test_status_maps_choice_to_watch_status(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_set_status(title: str, status: WatchStatus) -> Record:
        captured.update(title=title, status=status)
        return make_record("page-1", title, status=status)

    monkeypatch.setattr(cli, "set_watch_status", fake_set_status)

    cli.main(["status", "Gravity", "watched"])

    assert captured == {"title": "Gravity", "status": WatchStatus.WATCHED}


def test_list_defaults_to_to_watch(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[WatchStatus] = []

    def fake_list(status: WatchStatus) -> list[Record]:
        captured.append(status)
        return []

    monkeypatch.setattr(cli, "list_watchlist", fake_list)

    cli.main(["list"])

    assert captured == [WatchStatus.TO_WATCH]


def test_ambiguous_status_change_lists_candidates(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    candidates = (make_record("page-1", "Aliens"), make_record("page-2", "Alien: Romulus"))

    def fake_set_status(title: str, status: WatchStatus) -> None:
        raise AmbiguousMatchError(title, candidates)

    monkeypatch.setattr(cli, "set_watch_status", fake_set_status)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["status", "Alien", "watching"])

    assert excinfo.value.code == 1
    assert "Aliens" in caplog.text
    assert "Alien: Romulus" in caplog.text


def test_missing_configuration_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_search(query: str) -> None:
        raise MissingConfigurationError("Missing configuration for: NOTION_TOKEN")

    monkeypatch.setattr(cli, "search_watchlist", fake_search)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["search", "grav"])

    assert excinfo.value.code == 2


def test_unknown_status_choice_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["status", "Gravity", "abandoned"])

    assert excinfo.value.code == 2
