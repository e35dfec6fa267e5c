"""TMDB API client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Literal

import httpx
from pydantic import BaseModel, ValidationError

from watchlistpy.adapters.http_resilience import ResilientClient

from .schema import (
    TmdbDetails,
    TmdbErrorResponse,
    TmdbSearchResponse,
    TmdbWatchProvidersResponse,
)

if TYPE_CHECKING:
    from types import TracebackType

    from watchlistpy.adapters.http_resilience import ClientFactory
    from watchlistpy.config.tmdb import TmdbConfig

log = getLogger(__name__)

type TmdbMediaPath = Literal["movie", "tv"]


class TmdbAPIError(RuntimeError):
    """Raised when a TMDB request fails or returns an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TmdbClient:
    """Low-level HTTP client for the TMDB v3 API.

    One instance owns one rate-limited HTTP session; use it as an async context
    manager or call ``aclose`` when done.
    """

    def __init__(
        self,
        *,
        config: TmdbConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._http = (client_factory or ResilientClient)(config.resilience)

    async def __aenter__(self) -> TmdbClient:
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

    async def search_multi(self, query: str) -> TmdbSearchResponse:
        params = self._params(query=query, include_adult="false")
        return await self._get("search/multi", params, TmdbSearchResponse)

    async def get_details(self, media_path: TmdbMediaPath, tmdb_id: str) -> TmdbDetails:
        return await self._get(f"{media_path}/{tmdb_id}", self._params(), TmdbDetails)

    async def get_watch_providers(
        self,
        media_path: TmdbMediaPath,
        tmdb_id: str,
    ) -> TmdbWatchProvidersResponse:
        # the region filter is applied client side; the endpoint returns every region
        return await self._get(
            f"{media_path}/{tmdb_id}/watch/providers",
            {"api_key": self._config.api_key},
            TmdbWatchProvidersResponse,
        )

    def _params(self, **extra: str) -> dict[str, str]:
        params = {"api_key": self._config.api_key}
        if self._config.language:
            params["language"] = self._config.language
        params.update(extra)
        return params

    async def _get[TModel: BaseModel](
        self,
        path: str,
        params: dict[str, str],
        model: type[TModel],
    ) -> TModel:
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise TmdbAPIError(f"TMDB request to {path} failed: {exc}") from exc

        if response.is_error:
            raise TmdbAPIError(
                f"TMDB request to {path} failed with status {response.status_code}: "
                f"{_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            log.debug("Unexpected TMDB payload for %s: %s", path, response.text)
            raise TmdbAPIError(f"Unexpected TMDB response payload for {path}") from exc


def _error_message(response: httpx.Response) -> str:
    try:
        payload = TmdbErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return response.reason_phrase
    return payload.status_message or response.reason_phrase
