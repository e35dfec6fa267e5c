"""Map catalog detail records onto the record store's property set.

Everything here is pure: no I/O, deterministic for equal inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from watchlistpy.domain.errors import CatalogFetchError
from watchlistpy.domain.model import Format, MediaType, RecordProperties

if TYPE_CHECKING:
    from watchlistpy.domain.model import CatalogDetail, Providers


def map_properties(
    detail: CatalogDetail,
    media_type: MediaType,
    providers: Providers,
) -> RecordProperties:
    """Build the properties for ``detail``. Status is never included.

    Raises ``CatalogFetchError`` when the detail lacks an id or a title.
    """

    if not detail.external_id.strip():
        raise CatalogFetchError("Catalog item has no id")
    is_series = media_type is MediaType.SERIES
    return RecordProperties(
        title=canonical_title(detail),
        external_id=detail.external_id,
        format=Format.for_media_type(media_type),
        year=_release_year(detail, media_type),
        rating=_rating(detail.vote_average),
        genres=_unique(detail.genres),
        season_count=(detail.season_count or None) if is_series else None,
        episode_count=(detail.episode_count or None) if is_series else None,
        platform=providers[0] if providers else None,
    )


def canonical_title(detail: CatalogDetail) -> str:
    title = (detail.title or "").strip() or (detail.name or "").strip()
    if not title:
        raise CatalogFetchError(f"Catalog item {detail.external_id} has no title or name")
    return title


def select_artwork(detail: CatalogDetail) -> str | None:
    """Poster first, backdrop as fallback."""

    return detail.poster_url or detail.backdrop_url


def _release_year(detail: CatalogDetail, media_type: MediaType) -> int | None:
    if media_type is MediaType.SERIES:
        candidates = (detail.first_air_date, detail.release_date)
    else:
        candidates = (detail.release_date, detail.first_air_date)
    date_str = next((value for value in candidates if value), None)
    if date_str is None:
        return None
    prefix = date_str.strip()[:4]
    if len(prefix) != 4 or not prefix.isdigit():
        return None
    return int(prefix)


def _rating(vote_average: float | None) -> float | None:
    if vote_average is None:
        return None
    rounded = round(vote_average, 1)
    # zero means "no votes yet" in the catalog
    if rounded == 0:
        return None
    return rounded


def _unique(names: tuple[str, ...]) -> tuple[str, ...]:
    seen: set[str] = set()
    unique: list[str] = []
    for name in names:
        if name and name not in seen:
            seen.add(name)
            unique.append(name)
    return tuple(unique)
