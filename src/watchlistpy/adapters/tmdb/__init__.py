"""Public interface for the TMDB adapter."""

from __future__ import annotations

from .catalog import TmdbCatalog, select_best_hit
from .client import TmdbAPIError, TmdbClient
from .schema import TmdbDetails, TmdbSearchResponse, TmdbSearchResult, TmdbWatchProvidersResponse

__all__ = [
    "TmdbAPIError",
    "TmdbCatalog",
    "TmdbClient",
    "TmdbDetails",
    "TmdbSearchResponse",
    "TmdbSearchResult",
    "TmdbWatchProvidersResponse",
    "select_best_hit",
]
