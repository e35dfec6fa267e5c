"""Typed failures surfaced by the watchlist core.

Front-ends render these; nothing here formats user-facing replies beyond the
exception message itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from watchlistpy.domain.model import Record


class WatchlistError(RuntimeError):
    """Base class for every failure the core reports instead of crashing."""


class NotFoundError(WatchlistError):
    """The catalog returned no hit for a title."""

    def __init__(self, title: str) -> None:
        super().__init__(f'No catalog results found for "{title}"')
        self.title = title


class UnsupportedMediaTypeError(WatchlistError):
    """The catalog only returned hits that are neither movies nor series."""

    def __init__(self, title: str, media_type: str | None) -> None:
        super().__init__(
            f'Found a result for "{title}", but it is not a movie or TV show ({media_type})'
        )
        self.title = title
        self.media_type = media_type


class AmbiguousMatchError(WatchlistError):
    """More than one stored record matched; a more specific query is needed."""

    def __init__(self, query: str, candidates: tuple[Record, ...]) -> None:
        super().__init__(f'Found {len(candidates)} matches for "{query}"')
        self.query = query
        self.candidates = candidates


class RecordNotFoundError(WatchlistError):
    """No stored record matched a title."""

    def __init__(self, query: str) -> None:
        super().__init__(f'Could not find "{query}" in the watchlist')
        self.query = query


class CatalogFetchError(WatchlistError):
    """A catalog request failed (transport error or non-2xx response)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderFetchError(CatalogFetchError):
    """The provider lookup failed; reconciliation degrades to no providers."""


class StoreError(WatchlistError):
    """A record store request failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StoreReadError(StoreError):
    """Querying the record store failed."""


class StoreWriteError(StoreError):
    """Creating or updating a record, or appending to it, failed."""
