"""Minimal Pydantic models for the TMDB v3 API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class TmdbBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TmdbSearchResult(TmdbBaseModel):
    id: int
    media_type: str
    title: str | None = None
    name: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    vote_average: float | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None

    _normalize_blanks = field_validator(
        "title",
        "name",
        "release_date",
        "first_air_date",
        "poster_path",
        "backdrop_path",
        mode="before",
    )(_blank_to_none)

    @property
    def display_title(self) -> str:
        return self.title or self.name or ""

    @property
    def release_year(self) -> int | None:
        date_str = self.release_date or self.first_air_date
        if date_str is None or not date_str[:4].isdigit():
            return None
        return int(date_str[:4])


class TmdbSearchResponse(TmdbBaseModel):
    page: int = 1
    total_pages: int = 0
    total_results: int = 0
    results: list[TmdbSearchResult] = Field(default_factory=list["TmdbSearchResult"])


class TmdbGenre(TmdbBaseModel):
    id: int
    name: str


class TmdbDetails(TmdbBaseModel):
    """Movie and TV detail payloads share this model; unused keys are dropped."""

    id: int
    title: str | None = None
    name: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    vote_average: float | None = None
    genres: list[TmdbGenre] = Field(default_factory=list["TmdbGenre"])
    number_of_seasons: int | None = None
    number_of_episodes: int | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None

    _normalize_blanks = field_validator(
        "title",
        "name",
        "release_date",
        "first_air_date",
        "poster_path",
        "backdrop_path",
        mode="before",
    )(_blank_to_none)


class TmdbProvider(TmdbBaseModel):
    provider_name: str
    provider_id: int | None = None
    display_priority: int | None = None


class TmdbRegionProviders(TmdbBaseModel):
    link: str | None = None
    flatrate: list[TmdbProvider] = Field(default_factory=list["TmdbProvider"])
    rent: list[TmdbProvider] = Field(default_factory=list["TmdbProvider"])
    buy: list[TmdbProvider] = Field(default_factory=list["TmdbProvider"])


class TmdbWatchProvidersResponse(TmdbBaseModel):
    id: int | None = None
    results: dict[str, TmdbRegionProviders] = Field(default_factory=dict)


class TmdbErrorResponse(TmdbBaseModel):
    status_code: int | None = None
    status_message: str | None = None
    success: bool | None = None
