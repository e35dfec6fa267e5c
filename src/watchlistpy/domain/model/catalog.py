"""Catalog-side value objects, as returned by a ``CatalogClient``."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import MediaType  # noqa: TC001

type Providers = tuple[str, ...]


@dataclass(slots=True, frozen=True, kw_only=True)
class ExternalItem:
    """The catalog item a free-text title resolved to."""

    external_id: str
    media_type: MediaType
    title: str
    release_year: int | None = None
    rating: float | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class CatalogDetail:
    """Full detail record for one catalog item.

    Fields keep the catalog's own shape (movie ``title`` vs series ``name``, raw
    dates, unrounded vote average); normalisation happens in the property mapper.
    Image references are absolute URLs.
    """

    external_id: str
    media_type: MediaType
    title: str | None = None
    name: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    vote_average: float | None = None
    genres: tuple[str, ...] = ()
    season_count: int | None = None
    episode_count: int | None = None
    poster_url: str | None = None
    backdrop_url: str | None = None
