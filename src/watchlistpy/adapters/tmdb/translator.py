"""Translate TMDB payloads into catalog value objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from watchlistpy.domain.model import CatalogDetail, ExternalItem, MediaType

if TYPE_CHECKING:
    from watchlistpy.config.tmdb import TmdbConfig
    from watchlistpy.domain.model import Providers

    from .client import TmdbMediaPath
    from .schema import TmdbDetails, TmdbSearchResult, TmdbWatchProvidersResponse

_MEDIA_TYPE_MAP: dict[str, MediaType] = {
    "movie": MediaType.MOVIE,
    "tv": MediaType.SERIES,
}

_MEDIA_PATH_MAP: dict[MediaType, TmdbMediaPath] = {
    MediaType.MOVIE: "movie",
    MediaType.SERIES: "tv",
}


def media_type_from_tmdb(value: str) -> MediaType | None:
    """``None`` for anything that is not a movie or a TV show (people, collections)."""

    return _MEDIA_TYPE_MAP.get(value)


def media_path(media_type: MediaType) -> TmdbMediaPath:
    return _MEDIA_PATH_MAP[media_type]


def translate_search_result(hit: TmdbSearchResult) -> ExternalItem:
    media_type = media_type_from_tmdb(hit.media_type)
    if media_type is None:
        raise ValueError(f"Unsupported TMDB media type: {hit.media_type}")
    return ExternalItem(
        external_id=str(hit.id),
        media_type=media_type,
        title=hit.display_title,
        release_year=hit.release_year,
        rating=hit.vote_average,
        poster_path=hit.poster_path,
        backdrop_path=hit.backdrop_path,
    )


def translate_details(
    details: TmdbDetails,
    media_type: MediaType,
    *,
    config: TmdbConfig,
) -> CatalogDetail:
    return CatalogDetail(
        external_id=str(details.id),
        media_type=media_type,
        title=details.title,
        name=details.name,
        release_date=details.release_date,
        first_air_date=details.first_air_date,
        vote_average=details.vote_average,
        genres=tuple(genre.name for genre in details.genres),
        season_count=details.number_of_seasons,
        episode_count=details.number_of_episodes,
        poster_url=config.image_url(details.poster_path),
        backdrop_url=config.image_url(details.backdrop_path),
    )


def translate_providers(response: TmdbWatchProvidersResponse, *, region: str) -> Providers:
    """Subscription ("flatrate") platforms for ``region``, in TMDB's display order."""

    offers = response.results.get(region)
    if offers is None:
        return ()
    names: list[str] = []
    for provider in offers.flatrate:
        if provider.provider_name not in names:
            names.append(provider.provider_name)
    return tuple(names)
