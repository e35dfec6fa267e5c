"""Application orchestration entry points.

Each function reads configuration up front (so missing credentials fail before
any network traffic), builds its HTTP clients once, and runs inside a single
``asyncio.run``.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from logging import getLogger
from typing import TYPE_CHECKING

from watchlistpy.adapters.notion import NotionClient, NotionRecordStore
from watchlistpy.adapters.tmdb import TmdbCatalog, TmdbClient
from watchlistpy.config import get_notion_config, get_tmdb_config
from watchlistpy.domain.reconciliation import ReconciliationEngine, TitleSyncReport
from watchlistpy.domain.watchlist import WatchlistService

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from watchlistpy.adapters.http_resilience import ClientFactory
    from watchlistpy.config import NotionConfig, TmdbConfig
    from watchlistpy.domain.model import Record, WatchStatus


log = getLogger(__name__)


def sync_titles(
    titles: Sequence[str],
    *,
    tmdb_config: TmdbConfig | None = None,
    notion_config: NotionConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> list[TitleSyncReport]:
    """Add or refresh each title in the watchlist, one at a time."""

    effective_tmdb = tmdb_config or get_tmdb_config()
    effective_notion = notion_config or get_notion_config()
    log.info("Starting watchlist sync: titles=%d, region=%s", len(titles), effective_tmdb.region)

    reports = asyncio.run(
        _sync_titles_async(titles, effective_tmdb, effective_notion, client_factory)
    )

    outcomes = Counter(
        report.result.outcome.value if report.result is not None else "failed"
        for report in reports
    )
    log.info(
        "Finished watchlist sync: created=%d, updated=%d, failed=%d",
        outcomes["created"],
        outcomes["updated"],
        outcomes["failed"],
    )
    return reports


def search_watchlist(
    query: str,
    *,
    notion_config: NotionConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> list[Record]:
    return _run_watchlist(
        lambda service: service.search(query),
        notion_config=notion_config,
        client_factory=client_factory,
    )


def set_watch_status(
    title: str,
    status: WatchStatus,
    *,
    notion_config: NotionConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> Record:
    return _run_watchlist(
        lambda service: service.set_status(title, status),
        notion_config=notion_config,
        client_factory=client_factory,
    )


def list_watchlist(
    status: WatchStatus,
    *,
    notion_config: NotionConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> list[Record]:
    return _run_watchlist(
        lambda service: service.list_by_status(status),
        notion_config=notion_config,
        client_factory=client_factory,
    )


async def _sync_titles_async(
    titles: Sequence[str],
    tmdb_config: TmdbConfig,
    notion_config: NotionConfig,
    client_factory: ClientFactory | None,
) -> list[TitleSyncReport]:
    async with (
        TmdbClient(config=tmdb_config, client_factory=client_factory) as tmdb_client,
        NotionClient(config=notion_config, client_factory=client_factory) as notion_client,
    ):
        engine = ReconciliationEngine(
            catalog=TmdbCatalog(tmdb_client, tmdb_config),
            store=NotionRecordStore(notion_client, notion_config.status_labels),
        )
        return await engine.sync_many(titles)


def _run_watchlist[T](
    operation: Callable[[WatchlistService], Awaitable[T]],
    *,
    notion_config: NotionConfig | None,
    client_factory: ClientFactory | None,
) -> T:
    effective_notion = notion_config or get_notion_config()

    async def run() -> T:
        async with NotionClient(config=effective_notion, client_factory=client_factory) as client:
            service = WatchlistService(NotionRecordStore(client, effective_notion.status_labels))
            return await operation(service)

    return asyncio.run(run())
