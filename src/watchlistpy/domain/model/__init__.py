"""Domain model for the watchlist."""

from __future__ import annotations

from .catalog import CatalogDetail, ExternalItem, Providers
from .enums import Format, MediaType, WatchStatus
from .record import Record, RecordProperties

__all__ = [
    "CatalogDetail",
    "ExternalItem",
    "Format",
    "MediaType",
    "Providers",
    "Record",
    "RecordProperties",
    "WatchStatus",
]
