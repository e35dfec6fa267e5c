"""TMDB-backed implementation of the ``CatalogClient`` port."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from watchlistpy.domain.errors import (
    CatalogFetchError,
    NotFoundError,
    ProviderFetchError,
    UnsupportedMediaTypeError,
)

from .client import TmdbAPIError
from .translator import (
    media_path,
    media_type_from_tmdb,
    translate_details,
    translate_providers,
    translate_search_result,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from watchlistpy.config.tmdb import TmdbConfig
    from watchlistpy.domain.model import CatalogDetail, ExternalItem, MediaType, Providers
    from watchlistpy.domain.ports import CatalogClient

    from .client import TmdbClient
    from .schema import TmdbSearchResult

log = getLogger(__name__)


@dataclass(slots=True)
class TmdbCatalog:
    client: TmdbClient
    config: TmdbConfig

    async def resolve(self, title: str) -> ExternalItem:
        try:
            response = await self.client.search_multi(title)
        except TmdbAPIError as exc:
            raise CatalogFetchError(str(exc), status_code=exc.status_code) from exc

        hit = select_best_hit(response.results, title)
        log.debug("Resolved %r to TMDB %s %s", title, hit.media_type, hit.id)
        return translate_search_result(hit)

    async def fetch_detail(self, external_id: str, media_type: MediaType) -> CatalogDetail:
        try:
            details = await self.client.get_details(media_path(media_type), external_id)
        except TmdbAPIError as exc:
            raise CatalogFetchError(str(exc), status_code=exc.status_code) from exc
        return translate_details(details, media_type, config=self.config)

    async def fetch_providers(self, external_id: str, media_type: MediaType) -> Providers:
        try:
            response = await self.client.get_watch_providers(media_path(media_type), external_id)
        except TmdbAPIError as exc:
            raise ProviderFetchError(str(exc), status_code=exc.status_code) from exc
        return translate_providers(response, region=self.config.region)


def select_best_hit(hits: Sequence[TmdbSearchResult], title: str) -> TmdbSearchResult:
    """Pick the search hit a title refers to.

    An exact, case-insensitive title match among movies and TV shows beats
    TMDB's relevance order; otherwise the first movie or TV show wins.
    """

    if not hits:
        raise NotFoundError(title)

    supported = [hit for hit in hits if media_type_from_tmdb(hit.media_type) is not None]
    if not supported:
        raise UnsupportedMediaTypeError(title, hits[0].media_type)

    wanted = title.strip().casefold()
    exact = next((hit for hit in supported if hit.display_title.casefold() == wanted), None)
    return exact or supported[0]


if TYPE_CHECKING:
    _catalog_check: type[CatalogClient] = TmdbCatalog
