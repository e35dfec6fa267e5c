"""Reusable fakes and builders for watchlist reconciliation tests."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from watchlistpy.domain.errors import NotFoundError
from watchlistpy.domain.model import (
    CatalogDetail,
    ExternalItem,
    Format,
    MediaType,
    Record,
    WatchStatus,
)
from watchlistpy.domain.ports.store import FilterField, FilterOperator

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from watchlistpy.domain.model import Providers, RecordProperties
    from watchlistpy.domain.ports.store import RecordFilter

GRAVITY_POSTER = "https://image.tmdb.org/t/p/w500/kZ2nZw8D681aphje8NJi8EfbL1U.jpg"


def make_gravity_item() -> ExternalItem:
    return ExternalItem(
        external_id="49526",
        media_type=MediaType.MOVIE,
        title="Gravity",
        release_year=2013,
        rating=7.251,
        poster_path="/kZ2nZw8D681aphje8NJi8EfbL1U.jpg",
    )


def make_gravity_detail(**overrides: object) -> CatalogDetail:
    detail = CatalogDetail(
        external_id="49526",
        media_type=MediaType.MOVIE,
        title="Gravity",
        release_date="2013-10-03",
        vote_average=7.251,
        genres=("Science Fiction", "Thriller", "Drama"),
        poster_url=GRAVITY_POSTER,
        backdrop_url="https://image.tmdb.org/t/p/w500/4YAtSV3Bdy7VVkB1A1C8u6QKOMo.jpg",
    )
    return replace(detail, **overrides)  # type: ignore[arg-type]


def make_series_item() -> ExternalItem:
    return ExternalItem(
        external_id="1396",
        media_type=MediaType.SERIES,
        title="Breaking Bad",
        release_year=2008,
    )


def make_series_detail(**overrides: object) -> CatalogDetail:
    detail = CatalogDetail(
        external_id="1396",
        media_type=MediaType.SERIES,
        name="Breaking Bad",
        first_air_date="2008-01-20",
        vote_average=8.9,
        genres=("Drama", "Crime"),
        season_count=5,
        episode_count=62,
        poster_url="https://image.tmdb.org/t/p/w500/ztkUQFLlC19CCMYHW9o1zWhJRNq.jpg",
    )
    return replace(detail, **overrides)  # type: ignore[arg-type]


class ScriptedCatalog:
    """In-memory ``CatalogClient``; provider entries may be exceptions to raise."""

    def __init__(
        self,
        *,
        items: Mapping[str, ExternalItem] | None = None,
        details: Iterable[CatalogDetail] = (),
        providers: Mapping[str, Providers | Exception] | None = None,
    ) -> None:
        self.items = dict(items or {})
        self.details = {detail.external_id: detail for detail in details}
        self.providers = dict(providers or {})
        self.resolved: list[str] = []

    async def resolve(self, title: str) -> ExternalItem:
        self.resolved.append(title)
        try:
            return self.items[title]
        except KeyError:
            raise NotFoundError(title) from None

    async def fetch_detail(self, external_id: str, media_type: MediaType) -> CatalogDetail:
        del media_type
        return self.details[external_id]

    async def fetch_providers(self, external_id: str, media_type: MediaType) -> Providers:
        del media_type
        value = self.providers.get(external_id, ())
        if isinstance(value, Exception):
            raise value
        return value


class InMemoryRecordStore:
    """Dictionary-backed ``RecordStore`` that records every write."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self.records: dict[str, Record] = {record.record_id: record for record in records}
        self.images: dict[str, list[str]] = {}
        self.created: list[RecordProperties] = []
        self.updated: list[tuple[str, RecordProperties]] = []
        self.status_updates: list[tuple[str, WatchStatus]] = []
        self.queries: list[RecordFilter] = []
        self._next_id = 1

    @property
    def write_count(self) -> int:
        appended = sum(len(urls) for urls in self.images.values())
        return len(self.created) + len(self.updated) + len(self.status_updates) + appended

    def add(self, record: Record, *, images: Iterable[str] = ()) -> Record:
        self.records[record.record_id] = record
        if images:
            self.images[record.record_id] = list(images)
        return record

    async def query(self, record_filter: RecordFilter) -> list[Record]:
        self.queries.append(record_filter)
        return [record for record in self.records.values() if _matches(record, record_filter)]

    async def create(self, properties: RecordProperties) -> Record:
        self.created.append(properties)
        record_id = self._fresh_id()
        record = Record(
            record_id=record_id,
            title=properties.title,
            external_id=properties.external_id,
            status=properties.status,
            format=properties.format,
            year=properties.year,
            rating=properties.rating,
            genres=properties.genres,
            season_count=properties.season_count,
            episode_count=properties.episode_count,
            platform=properties.platform,
        )
        self.records[record_id] = record
        return record

    async def update(self, record_id: str, properties: RecordProperties) -> Record:
        self.updated.append((record_id, properties))
        current = self.records[record_id]
        record = replace(
            current,
            title=properties.title,
            external_id=properties.external_id,
            format=properties.format,
            year=properties.year,
            rating=properties.rating,
            genres=properties.genres,
            status=properties.status if properties.status is not None else current.status,
            season_count=_keep(properties.season_count, current.season_count),
            episode_count=_keep(properties.episode_count, current.episode_count),
            platform=_keep(properties.platform, current.platform),
        )
        self.records[record_id] = record
        return record

    async def update_status(self, record_id: str, status: WatchStatus) -> Record:
        self.status_updates.append((record_id, status))
        record = replace(self.records[record_id], status=status)
        self.records[record_id] = record
        return record

    def _fresh_id(self) -> str:
        # seeded records may already use "page-N" ids
        while f"page-{self._next_id}" in self.records:
            self._next_id += 1
        record_id = f"page-{self._next_id}"
        self._next_id += 1
        return record_id

    async def append_image(self, record_id: str, url: str) -> None:
        self.images.setdefault(record_id, []).append(url)

    async def list_images(self, record_id: str) -> list[str]:
        return list(self.images.get(record_id, []))


def make_record(
    record_id: str,
    title: str,
    *,
    external_id: str | None = None,
    status: WatchStatus | None = WatchStatus.TO_WATCH,
    format_: Format | None = Format.MOVIE,
    platform: str | None = None,
) -> Record:
    return Record(
        record_id=record_id,
        title=title,
        external_id=external_id,
        status=status,
        format=format_,
        platform=platform,
    )


def _keep[T](new: T | None, current: T | None) -> T | None:
    return new if new is not None else current


def _matches(record: Record, record_filter: RecordFilter) -> bool:
    match record_filter.field:
        case FilterField.EXTERNAL_ID:
            return record.external_id == record_filter.value
        case FilterField.STATUS:
            return record.status is not None and record.status.value == record_filter.value
        case FilterField.TITLE:
            if record_filter.operator is FilterOperator.CONTAINS:
                return record_filter.value.casefold() in record.title.casefold()
            return record.title == record_filter.value
