"""Reconciliation core: keep exactly one watchlist record per catalog item.

Layered flow:
1) resolve a free-text title to a catalog item
2) fetch its detail record and providers concurrently
3) map them onto the record store's property set
4) match against existing records (external id, then exact title)
5) create (with the default status) or update (status untouched)
6) attach artwork once
"""

from __future__ import annotations

from .attachments import AttachmentGuard
from .contracts import (
    AmbiguousMatch,
    MatchKind,
    MatchResult,
    NoMatch,
    SyncOutcome,
    SyncResult,
    TitleSyncReport,
    UniqueMatch,
)
from .engine import ReconciliationEngine
from .mapping import canonical_title, map_properties, select_artwork
from .matching import RecordMatcher

__all__ = [
    "AmbiguousMatch",
    "AttachmentGuard",
    "MatchKind",
    "MatchResult",
    "NoMatch",
    "ReconciliationEngine",
    "RecordMatcher",
    "SyncOutcome",
    "SyncResult",
    "TitleSyncReport",
    "UniqueMatch",
    "canonical_title",
    "map_properties",
    "select_artwork",
]
