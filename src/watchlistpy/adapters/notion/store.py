"""Notion-database implementation of the ``RecordStore`` port."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from watchlistpy.domain.errors import StoreReadError, StoreWriteError

from .client import NotionAPIError
from .translator import (
    build_filter,
    image_block,
    serialize_properties,
    status_property,
    translate_page,
)

if TYPE_CHECKING:
    from watchlistpy.config.notion import StatusLabels
    from watchlistpy.domain.model import Record, RecordProperties, WatchStatus
    from watchlistpy.domain.ports import RecordFilter, RecordStore

    from .client import NotionClient
    from .schema import NotionPage

log = getLogger(__name__)


@dataclass(slots=True)
class NotionRecordStore:
    client: NotionClient
    labels: StatusLabels

    async def query(self, record_filter: RecordFilter) -> list[Record]:
        notion_filter = build_filter(record_filter, labels=self.labels)
        pages: list[NotionPage] = []
        cursor: str | None = None
        while True:
            try:
                response = await self.client.query_database(
                    filter_=notion_filter,
                    start_cursor=cursor,
                )
            except NotionAPIError as exc:
                raise StoreReadError(str(exc), status_code=exc.status_code) from exc
            pages.extend(response.results)
            if not response.has_more or not response.next_cursor:
                break
            cursor = response.next_cursor

        return [
            translate_page(page, labels=self.labels)
            for page in pages
            if not (page.archived or page.in_trash)
        ]

    async def create(self, properties: RecordProperties) -> Record:
        payload = serialize_properties(properties, labels=self.labels)
        try:
            page = await self.client.create_page(payload)
        except NotionAPIError as exc:
            raise StoreWriteError(str(exc), status_code=exc.status_code) from exc
        return translate_page(page, labels=self.labels)

    async def update(self, record_id: str, properties: RecordProperties) -> Record:
        payload = serialize_properties(properties, labels=self.labels)
        return await self._update(record_id, payload)

    async def update_status(self, record_id: str, status: WatchStatus) -> Record:
        return await self._update(record_id, status_property(status, self.labels))

    async def append_image(self, record_id: str, url: str) -> None:
        try:
            await self.client.append_block_children(record_id, [image_block(url)])
        except NotionAPIError as exc:
            raise StoreWriteError(str(exc), status_code=exc.status_code) from exc
        log.debug("Appended image %s to %s", url, record_id)

    async def list_images(self, record_id: str) -> list[str]:
        urls: list[str] = []
        cursor: str | None = None
        while True:
            try:
                response = await self.client.list_block_children(record_id, start_cursor=cursor)
            except NotionAPIError as exc:
                raise StoreReadError(str(exc), status_code=exc.status_code) from exc
            for block in response.results:
                if block.type == "image" and block.image is not None and block.image.url:
                    urls.append(block.image.url)
            if not response.has_more or not response.next_cursor:
                return urls
            cursor = response.next_cursor

    async def _update(self, record_id: str, payload: dict[str, object]) -> Record:
        try:
            page = await self.client.update_page(record_id, payload)
        except NotionAPIError as exc:
            raise StoreWriteError(str(exc), status_code=exc.status_code) from exc
        return translate_page(page, labels=self.labels)


if TYPE_CHECKING:
    _store_check: type[RecordStore] = NotionRecordStore
