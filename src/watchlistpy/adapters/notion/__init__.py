"""Public interface for the Notion record-store adapter."""

from __future__ import annotations

from .client import NotionAPIError, NotionClient
from .schema import NotionBlockChildren, NotionPage, NotionQueryResponse
from .store import NotionRecordStore
from .translator import serialize_properties, translate_page

__all__ = [
    "NotionAPIError",
    "NotionBlockChildren",
    "NotionClient",
    "NotionPage",
    "NotionQueryResponse",
    "NotionRecordStore",
    "serialize_properties",
    "translate_page",
]
