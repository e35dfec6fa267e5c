"""Look up existing records for a catalog item or a title.

Matching priority, first non-empty step wins:

1. equality on the external id (the dedup key)
2. equality on the title (case-sensitive, as the store compares); when an
   external id is given, only records without one are considered
3. title ``contains``, only when the caller opts in

Catalog-driven reconciliation never opts into step 3 because a substring hit
("Alien" inside "Aliens") would silently update the wrong record. More than
one candidate at any step is reported as ambiguous, never narrowed to the
first result.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from watchlistpy.domain.ports.store import RecordFilter

from .contracts import AmbiguousMatch, MatchKind, MatchResult, NoMatch, UniqueMatch

if TYPE_CHECKING:
    from watchlistpy.domain.model import Record
    from watchlistpy.domain.ports.store import RecordStore

log = getLogger(__name__)


@dataclass(slots=True)
class RecordMatcher:
    store: RecordStore

    async def find(
        self,
        *,
        external_id: str | None = None,
        title: str | None = None,
        allow_contains: bool = False,
    ) -> MatchResult:
        if external_id:
            records = await self.store.query(RecordFilter.external_id_equals(external_id))
            if records:
                if len(records) > 1:
                    log.warning(
                        "%d records share external id %s; refusing to pick one",
                        len(records),
                        external_id,
                    )
                return _classify(records, MatchKind.EXTERNAL_ID)

        if title:
            records = await self.store.query(RecordFilter.title_equals(title))
            if external_id:
                # a title twin already enriched with another id is a different item
                records = [record for record in records if not record.external_id]
            if records:
                return _classify(records, MatchKind.EXACT_TITLE)

            if allow_contains:
                records = await self.store.query(RecordFilter.title_contains(title))
                if records:
                    return _classify(records, MatchKind.TITLE_CONTAINS)

        return NoMatch()

    async def search(self, query: str) -> list[Record]:
        """Every record whose title contains ``query``, for listings."""

        if not query.strip():
            return []
        return await self.store.query(RecordFilter.title_contains(query.strip()))


def _classify(records: list[Record], kind: MatchKind) -> MatchResult:
    if len(records) == 1:
        return UniqueMatch(record=records[0], match_kind=kind)
    return AmbiguousMatch(candidates=tuple(records), match_kind=kind)
