"""Shared reconciliation contract components.

This module intentionally holds only:
- the ``MatchResult`` union produced by the record matcher
- the outcome types returned by the engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from watchlistpy.domain.errors import WatchlistError
    from watchlistpy.domain.model import ExternalItem, Record


class MatchKind(StrEnum):
    """Which matching rule produced the candidates."""

    EXTERNAL_ID = "external_id"
    EXACT_TITLE = "exact_title"
    TITLE_CONTAINS = "title_contains"


@dataclass(slots=True, frozen=True)
class NoMatch:
    """No stored record matched."""


@dataclass(slots=True, frozen=True, kw_only=True)
class UniqueMatch:
    record: Record
    match_kind: MatchKind


@dataclass(slots=True, frozen=True, kw_only=True)
class AmbiguousMatch:
    candidates: tuple[Record, ...]
    match_kind: MatchKind

    def __post_init__(self) -> None:
        if len(self.candidates) < 2:
            raise ValueError("Ambiguous match must include at least two candidates")


type MatchResult = NoMatch | UniqueMatch | AmbiguousMatch


class SyncOutcome(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(slots=True, frozen=True, kw_only=True)
class SyncResult:
    """Summary of one successful ``sync_one`` call."""

    outcome: SyncOutcome
    record: Record
    item: ExternalItem
    image_attached: bool = False


@dataclass(slots=True, frozen=True)
class TitleSyncReport:
    """Per-title entry of a sequential batch; exactly one of the fields is set."""

    title: str
    result: SyncResult | None = None
    error: WatchlistError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
