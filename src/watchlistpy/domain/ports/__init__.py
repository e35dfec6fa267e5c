"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import CatalogClient
from .store import FilterField, FilterOperator, RecordFilter, RecordStore

__all__ = [
    "CatalogClient",
    "FilterField",
    "FilterOperator",
    "RecordFilter",
    "RecordStore",
]
