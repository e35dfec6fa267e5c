"""HTTP client for the Notion API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ValidationError

from watchlistpy.adapters.http_resilience import ResilientClient

from .schema import NotionBlockChildren, NotionErrorResponse, NotionPage, NotionQueryResponse

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from types import TracebackType

    from watchlistpy.adapters.http_resilience import ClientFactory
    from watchlistpy.config.notion import NotionConfig

log = getLogger(__name__)

type JsonObject = dict[str, object]

NOTION_PAGE_SIZE = 100


class NotionAPIError(RuntimeError):
    """Raised when the Notion API rejects a request or cannot be reached."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class NotionClient:
    """Low-level client for one Notion database and its pages."""

    def __init__(
        self,
        *,
        config: NotionConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._http = (client_factory or ResilientClient)(config.resilience)

    async def __aenter__(self) -> NotionClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def query_database(
        self,
        *,
        filter_: Mapping[str, object],
        start_cursor: str | None = None,
        page_size: int = NOTION_PAGE_SIZE,
    ) -> NotionQueryResponse:
        body: JsonObject = {"filter": dict(filter_), "page_size": page_size}
        if start_cursor is not None:
            body["start_cursor"] = start_cursor
        return await self._request(
            "POST",
            f"databases/{self._config.database_id}/query",
            NotionQueryResponse,
            json=body,
        )

    async def create_page(self, properties: Mapping[str, object]) -> NotionPage:
        body: JsonObject = {
            "parent": {"database_id": self._config.database_id},
            "properties": dict(properties),
        }
        return await self._request("POST", "pages", NotionPage, json=body, replay_safe=False)

    async def update_page(self, page_id: str, properties: Mapping[str, object]) -> NotionPage:
        if not page_id:
            raise NotionAPIError("Cannot update Notion page: page id is empty")
        return await self._request(
            "PATCH",
            f"pages/{page_id}",
            NotionPage,
            json={"properties": dict(properties)},
        )

    async def append_block_children(
        self,
        block_id: str,
        children: Sequence[Mapping[str, object]],
    ) -> NotionBlockChildren:
        return await self._request(
            "PATCH",
            f"blocks/{block_id}/children",
            NotionBlockChildren,
            json={"children": [dict(child) for child in children]},
            replay_safe=False,
        )

    async def list_block_children(
        self,
        block_id: str,
        *,
        start_cursor: str | None = None,
        page_size: int = NOTION_PAGE_SIZE,
    ) -> NotionBlockChildren:
        params = {"page_size": str(page_size)}
        if start_cursor is not None:
            params["start_cursor"] = start_cursor
        return await self._request(
            "GET",
            f"blocks/{block_id}/children",
            NotionBlockChildren,
            params=params,
        )

    async def _request[TModel: BaseModel](
        self,
        method: str,
        path: str,
        model: type[TModel],
        *,
        json: JsonObject | None = None,
        params: dict[str, str] | None = None,
        replay_safe: bool = True,
    ) -> TModel:
        try:
            response = await self._http.request(
                method, path, replay_safe=replay_safe, json=json, params=params
            )
        except httpx.HTTPError as exc:
            raise NotionAPIError(f"Notion {method} {path} failed: {exc}") from exc

        if response.is_error:
            error = _parse_error(response)
            log.error(
                "Notion API error %s (%s): %s",
                response.status_code,
                error.code,
                error.message,
            )
            raise NotionAPIError(
                f"Notion {method} {path} failed with status {response.status_code}: "
                f"{error.message or response.reason_phrase}",
                status_code=response.status_code,
                code=error.code,
            )

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise NotionAPIError(f"Unexpected Notion response payload for {path}") from exc


def _parse_error(response: httpx.Response) -> NotionErrorResponse:
    try:
        return NotionErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return NotionErrorResponse(status=response.status_code)
