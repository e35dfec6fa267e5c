"""Record-store side value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .enums import Format, WatchStatus


@dataclass(slots=True, frozen=True, kw_only=True)
class RecordProperties:
    """Explicit property set written to the record store.

    ``None`` for ``platform``, ``status`` and the series counts means "leave the
    stored value alone"; the serializer omits those properties entirely.
    """

    title: str
    external_id: str
    format: Format
    year: int | None = None
    rating: float | None = None
    genres: tuple[str, ...] = ()
    season_count: int | None = None
    episode_count: int | None = None
    platform: str | None = None
    status: WatchStatus | None = None

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Record properties require a non-blank title")
        if not self.external_id.strip():
            raise ValueError("Record properties require a non-blank external id")

    def with_status(self, status: WatchStatus) -> RecordProperties:
        return replace(self, status=status)


@dataclass(slots=True, frozen=True, kw_only=True)
class Record:
    """A watchlist entry as it currently exists in the record store."""

    record_id: str
    title: str
    external_id: str | None = None
    status: WatchStatus | None = None
    format: Format | None = None
    year: int | None = None
    rating: float | None = None
    genres: tuple[str, ...] = ()
    season_count: int | None = None
    episode_count: int | None = None
    platform: str | None = None
