"""Port for the external metadata catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from watchlistpy.domain.model import CatalogDetail, ExternalItem, MediaType, Providers


@runtime_checkable
class CatalogClient(Protocol):
    """Read-only access to canonical movie/series metadata."""

    async def resolve(self, title: str) -> ExternalItem:
        """Resolve a free-text title to one catalog item.

        Raises ``NotFoundError`` when nothing matches and
        ``UnsupportedMediaTypeError`` when no hit is a movie or series.
        """
        ...

    async def fetch_detail(self, external_id: str, media_type: MediaType) -> CatalogDetail: ...

    async def fetch_providers(self, external_id: str, media_type: MediaType) -> Providers:
        """Return platform names in catalog order; raises ``ProviderFetchError``."""
        ...
