"""Port for the destination record store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from watchlistpy.domain.model import Record, RecordProperties, WatchStatus


class FilterField(StrEnum):
    EXTERNAL_ID = "external_id"
    TITLE = "title"
    STATUS = "status"


class FilterOperator(StrEnum):
    EQUALS = "equals"
    CONTAINS = "contains"


@dataclass(slots=True, frozen=True)
class RecordFilter:
    """One store-side predicate. ``value`` is a status name for ``STATUS``."""

    field: FilterField
    operator: FilterOperator
    value: str

    def __post_init__(self) -> None:
        if self.operator is FilterOperator.CONTAINS and self.field is not FilterField.TITLE:
            raise ValueError(f"'contains' is only supported on titles, not {self.field}")

    @classmethod
    def external_id_equals(cls, external_id: str) -> RecordFilter:
        return cls(FilterField.EXTERNAL_ID, FilterOperator.EQUALS, external_id)

    @classmethod
    def title_equals(cls, title: str) -> RecordFilter:
        return cls(FilterField.TITLE, FilterOperator.EQUALS, title)

    @classmethod
    def title_contains(cls, title: str) -> RecordFilter:
        return cls(FilterField.TITLE, FilterOperator.CONTAINS, title)

    @classmethod
    def status_equals(cls, status: WatchStatus) -> RecordFilter:
        return cls(FilterField.STATUS, FilterOperator.EQUALS, status.value)


@runtime_checkable
class RecordStore(Protocol):
    """Persistence contract for watchlist records.

    The store does not enforce external-id uniqueness; callers do.
    """

    async def query(self, record_filter: RecordFilter) -> list[Record]: ...

    async def create(self, properties: RecordProperties) -> Record: ...

    async def update(self, record_id: str, properties: RecordProperties) -> Record:
        """Overwrite the given properties; omitted ones keep their stored value."""
        ...

    async def update_status(self, record_id: str, status: WatchStatus) -> Record: ...

    async def append_image(self, record_id: str, url: str) -> None: ...

    async def list_images(self, record_id: str) -> list[str]: ...
