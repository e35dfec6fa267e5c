"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class MediaType(StrEnum):
    MOVIE = "movie"
    SERIES = "series"


class Format(StrEnum):
    MOVIE = "Movie"
    SERIES = "Series"

    @classmethod
    def for_media_type(cls, media_type: MediaType) -> Format:
        return cls.SERIES if media_type is MediaType.SERIES else cls.MOVIE


class WatchStatus(StrEnum):
    """Where an entry sits in the user's watchlist.

    Only ``TO_WATCH`` is ever written by reconciliation, and only on creation.
    """

    TO_WATCH = "ToWatch"
    WATCHING = "Watching"
    WATCHED = "Watched"
