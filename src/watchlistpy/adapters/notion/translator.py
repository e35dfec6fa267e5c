"""Translate between watchlist records and Notion page/property JSON."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from watchlistpy.domain.model import Format, Record, WatchStatus
from watchlistpy.domain.ports.store import FilterField, FilterOperator

if TYPE_CHECKING:
    from watchlistpy.config.notion import StatusLabels
    from watchlistpy.domain.model import RecordProperties
    from watchlistpy.domain.ports.store import RecordFilter

    from .schema import NotionPage, NotionPropertyValue

log = getLogger(__name__)

type PropertyJson = dict[str, object]

TITLE: Final = "Title"
EXTERNAL_ID: Final = "TMDB ID"
FORMAT: Final = "Format"
STATUS: Final = "Status"
YEAR: Final = "Year"
RATING: Final = "IMDb"
GENRE: Final = "Genre"
SEASONS: Final = "Seasons"
EPISODES: Final = "Total Eps"
PLATFORM: Final = "Platform"

_FORMAT_LABELS: dict[Format, str] = {
    Format.MOVIE: "Movie",
    Format.SERIES: "TV Show",
}

_FORMAT_BY_LABEL: dict[str, Format] = {
    "Movie": Format.MOVIE,
    "TV Show": Format.SERIES,
    "🎬 Movie": Format.MOVIE,
    "📺 TV Show": Format.SERIES,
}


def status_label(status: WatchStatus, labels: StatusLabels) -> str:
    match status:
        case WatchStatus.TO_WATCH:
            return labels.to_watch
        case WatchStatus.WATCHING:
            return labels.watching
        case WatchStatus.WATCHED:
            return labels.watched


def status_from_label(label: str, labels: StatusLabels) -> WatchStatus | None:
    for status in WatchStatus:
        if status_label(status, labels) == label:
            return status
    return None


def status_property(status: WatchStatus, labels: StatusLabels) -> PropertyJson:
    return {STATUS: {"select": {"name": status_label(status, labels)}}}


def serialize_properties(properties: RecordProperties, *, labels: StatusLabels) -> PropertyJson:
    """Render ``properties`` as a Notion ``properties`` payload.

    Nullable scalars are written as ``null`` so stale values are cleared; the
    platform, the series counts and the status are omitted when unset so a
    refresh never erases them.
    """

    payload: PropertyJson = {
        TITLE: {"title": [{"text": {"content": properties.title}}]},
        EXTERNAL_ID: {"number": int(properties.external_id)},
        FORMAT: {"select": {"name": _FORMAT_LABELS[properties.format]}},
        YEAR: {"number": properties.year},
        RATING: {"number": properties.rating},
        GENRE: {"multi_select": [{"name": name} for name in properties.genres]},
    }
    if properties.season_count is not None:
        payload[SEASONS] = {"number": properties.season_count}
    if properties.episode_count is not None:
        payload[EPISODES] = {"number": properties.episode_count}
    if properties.platform is not None:
        payload[PLATFORM] = {"select": {"name": properties.platform}}
    if properties.status is not None:
        payload.update(status_property(properties.status, labels))
    return payload


def build_filter(record_filter: RecordFilter, *, labels: StatusLabels) -> PropertyJson:
    match record_filter.field:
        case FilterField.EXTERNAL_ID:
            return {
                "property": EXTERNAL_ID,
                "number": {"equals": int(record_filter.value)},
            }
        case FilterField.TITLE:
            operator = (
                "contains" if record_filter.operator is FilterOperator.CONTAINS else "equals"
            )
            return {"property": TITLE, "title": {operator: record_filter.value}}
        case FilterField.STATUS:
            label = status_label(WatchStatus(record_filter.value), labels)
            return {"property": STATUS, "select": {"equals": label}}


def image_block(url: str) -> PropertyJson:
    return {
        "object": "block",
        "type": "image",
        "image": {"type": "external", "external": {"url": url}},
    }


def translate_page(page: NotionPage, *, labels: StatusLabels) -> Record:
    props = page.properties
    return Record(
        record_id=page.id,
        title=_text(props.get(TITLE)) or "",
        external_id=_external_id(props.get(EXTERNAL_ID)),
        status=_status(page.id, props.get(STATUS), labels),
        format=_format(props.get(FORMAT)),
        year=_int(props.get(YEAR)),
        rating=_number(props.get(RATING)),
        genres=_names(props.get(GENRE)),
        season_count=_int(props.get(SEASONS)),
        episode_count=_int(props.get(EPISODES)),
        platform=_select(props.get(PLATFORM)),
    )


def _text(value: NotionPropertyValue | None) -> str | None:
    return value.plain_text() if value is not None else None


def _number(value: NotionPropertyValue | None) -> float | None:
    return value.number if value is not None else None


def _int(value: NotionPropertyValue | None) -> int | None:
    number = _number(value)
    return int(number) if number is not None else None


def _external_id(value: NotionPropertyValue | None) -> str | None:
    number = _int(value)
    return str(number) if number is not None else None


def _select(value: NotionPropertyValue | None) -> str | None:
    if value is None or value.select is None:
        return None
    return value.select.name


def _names(value: NotionPropertyValue | None) -> tuple[str, ...]:
    if value is None or not value.multi_select:
        return ()
    return tuple(option.name for option in value.multi_select)


def _format(value: NotionPropertyValue | None) -> Format | None:
    label = _select(value)
    return _FORMAT_BY_LABEL.get(label) if label is not None else None


def _status(
    page_id: str,
    value: NotionPropertyValue | None,
    labels: StatusLabels,
) -> WatchStatus | None:
    label = _select(value)
    if label is None:
        return None
    status = status_from_label(label, labels)
    if status is None:
        log.warning("Page %s has unknown status label %r", page_id, label)
    return status
