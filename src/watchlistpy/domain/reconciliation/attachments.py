"""Keep at most one copy of each artwork image on a record."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from watchlistpy.domain.ports.store import RecordStore

log = getLogger(__name__)


@dataclass(slots=True)
class AttachmentGuard:
    """Append an image only when the record does not already carry it.

    The read-then-append is not atomic; it relies on one caller syncing a given
    title at a time.
    """

    store: RecordStore

    async def ensure(self, record_id: str, image_url: str | None) -> bool:
        """Return ``True`` when an image block was appended."""

        if not image_url:
            return False
        existing = await self.store.list_images(record_id)
        if image_url in existing:
            log.debug("Record %s already has image %s", record_id, image_url)
            return False
        await self.store.append_image(record_id, image_url)
        return True
