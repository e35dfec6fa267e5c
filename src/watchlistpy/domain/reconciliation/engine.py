"""Orchestrator for catalog-to-watchlist reconciliation.

The engine composes the catalog and store ports but does not prescribe
concrete adapters, so tests and alternative front-ends can inject fakes.

Stages, each depending on the previous one:
resolve -> fetch (detail and providers, concurrently) -> map -> match -> write -> attach
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from watchlistpy.domain.errors import (
    AmbiguousMatchError,
    NotFoundError,
    ProviderFetchError,
    WatchlistError,
)
from watchlistpy.domain.model import WatchStatus

from .attachments import AttachmentGuard
from .contracts import (
    AmbiguousMatch,
    NoMatch,
    SyncOutcome,
    SyncResult,
    TitleSyncReport,
    UniqueMatch,
)
from .mapping import map_properties, select_artwork
from .matching import RecordMatcher

if TYPE_CHECKING:
    from collections.abc import Iterable

    from watchlistpy.domain.model import (
        CatalogDetail,
        ExternalItem,
        Providers,
        Record,
        RecordProperties,
    )
    from watchlistpy.domain.ports import CatalogClient, RecordStore

    from .contracts import MatchResult

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Create-or-update one watchlist record per catalog item."""

    catalog: CatalogClient
    store: RecordStore
    matcher: RecordMatcher = field(init=False)
    attachments: AttachmentGuard = field(init=False)

    def __post_init__(self) -> None:
        self.matcher = RecordMatcher(self.store)
        self.attachments = AttachmentGuard(self.store)

    async def sync_one(self, title: str) -> SyncResult:
        """Resolve ``title`` and upsert its record; safe to rerun after a failure."""

        query = title.strip()
        if not query:
            raise NotFoundError(title)

        item = await self.catalog.resolve(query)
        detail, providers = await self._fetch(item)
        properties = map_properties(detail, item.media_type, providers)

        match_result = await self.matcher.find(
            external_id=item.external_id,
            title=properties.title,
        )
        outcome, record = await self._write(match_result, properties)

        attached = await self.attachments.ensure(record.record_id, select_artwork(detail))
        return SyncResult(outcome=outcome, record=record, item=item, image_attached=attached)

    async def sync_many(self, titles: Iterable[str]) -> list[TitleSyncReport]:
        """Sync titles one after another; a failing title does not stop the rest."""

        reports: list[TitleSyncReport] = []
        for title in titles:
            log.info("Processing: %s", title)
            try:
                result = await self.sync_one(title)
            except WatchlistError as exc:
                log.warning("Sync failed for %r: %s", title, exc)
                reports.append(TitleSyncReport(title=title, error=exc))
                continue
            reports.append(TitleSyncReport(title=title, result=result))
        return reports

    async def _fetch(self, item: ExternalItem) -> tuple[CatalogDetail, Providers]:
        detail, providers = await asyncio.gather(
            self.catalog.fetch_detail(item.external_id, item.media_type),
            self._fetch_providers(item),
        )
        return detail, providers

    async def _fetch_providers(self, item: ExternalItem) -> Providers:
        try:
            return await self.catalog.fetch_providers(item.external_id, item.media_type)
        except ProviderFetchError as exc:
            log.warning(
                "Could not fetch providers for %s %s: %s",
                item.media_type,
                item.external_id,
                exc,
            )
            return ()

    async def _write(
        self,
        match_result: MatchResult,
        properties: RecordProperties,
    ) -> tuple[SyncOutcome, Record]:
        match match_result:
            case UniqueMatch(record=existing):
                # status stays whatever the user last set it to
                record = await self.store.update(existing.record_id, properties)
                log.info("Updated: %s (%s)", properties.title, record.record_id)
                return SyncOutcome.UPDATED, record
            case NoMatch():
                record = await self.store.create(properties.with_status(WatchStatus.TO_WATCH))
                log.info("Created: %s (%s)", properties.title, record.record_id)
                return SyncOutcome.CREATED, record
            case AmbiguousMatch(candidates=candidates):
                raise AmbiguousMatchError(properties.title, candidates)
