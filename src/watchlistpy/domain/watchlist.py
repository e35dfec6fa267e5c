"""Application services for browsing the watchlist and moving entries along it."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from watchlistpy.domain.errors import AmbiguousMatchError, RecordNotFoundError
from watchlistpy.domain.ports.store import RecordFilter
from watchlistpy.domain.reconciliation import AmbiguousMatch, NoMatch, RecordMatcher, UniqueMatch

if TYPE_CHECKING:
    from watchlistpy.domain.model import Record, WatchStatus
    from watchlistpy.domain.ports.store import RecordStore

log = getLogger(__name__)


@dataclass(slots=True)
class WatchlistService:
    store: RecordStore
    matcher: RecordMatcher = field(init=False)

    def __post_init__(self) -> None:
        self.matcher = RecordMatcher(self.store)

    async def search(self, query: str) -> list[Record]:
        return await self.matcher.search(query)

    async def list_by_status(self, status: WatchStatus) -> list[Record]:
        return await self.store.query(RecordFilter.status_equals(status))

    async def set_status(self, title: str, status: WatchStatus) -> Record:
        """Move the record matching ``title`` to ``status``.

        An exact title wins over substring hits, so "Alien" can be updated even
        when "Aliens" is also on the list.
        """

        query = title.strip()
        if not query:
            raise RecordNotFoundError(title)

        match await self.matcher.find(title=query, allow_contains=True):
            case UniqueMatch(record=record):
                updated = await self.store.update_status(record.record_id, status)
                log.info("Marked %s (%s) as %s", updated.title, updated.record_id, status)
                return updated
            case AmbiguousMatch(candidates=candidates):
                raise AmbiguousMatchError(query, candidates)
            case NoMatch():
                raise RecordNotFoundError(query)
