"""TMDB configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .errors import InvalidConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

TMDB_BASE_URL = "https://api.themoviedb.org/3/"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
TMDB_TIMEOUT_SECONDS = 10.0
DEFAULT_WATCH_REGION = "US"


@dataclass(frozen=True, slots=True)
class TmdbConfig:
    """Holds TMDB API configuration values."""

    api_key: str
    resilience: ResilienceConfig
    region: str = DEFAULT_WATCH_REGION
    image_base_url: str = TMDB_IMAGE_BASE_URL
    language: str | None = None

    def image_url(self, path: str | None) -> str | None:
        if not path:
            return None
        return f"{self.image_base_url.rstrip('/')}/{path.lstrip('/')}"


def default_tmdb_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="tmdb",
        base_url=TMDB_BASE_URL,
        timeout_seconds=TMDB_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
    )


def get_tmdb_config(*, resilience: ResilienceConfig | None = None) -> TmdbConfig:
    values = require_env_vars(("TMDB_API_KEY",))
    region = optional_env_var("TMDB_REGION", DEFAULT_WATCH_REGION).upper()
    if len(region) != 2 or not region.isalpha():
        raise InvalidConfigurationError("TMDB_REGION", region, "expected a two-letter country code")
    language = optional_env_var("TMDB_LANGUAGE", "") or None
    return TmdbConfig(
        api_key=values["TMDB_API_KEY"],
        resilience=resilience or default_tmdb_resilience(),
        region=region,
        image_base_url=optional_env_var("TMDB_IMAGE_BASE_URL", TMDB_IMAGE_BASE_URL),
        language=language,
    )
