from __future__ import annotations

import pytest

from watchlistpy.config import (
    InvalidConfigurationError,
    MissingConfigurationError,
    TmdbConfig,
    get_tmdb_config,
)
from watchlistpy.config.tmdb import TMDB_BASE_URL, default_tmdb_resilience


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TMDB_API_KEY", "TMDB_REGION", "TMDB_IMAGE_BASE_URL", "TMDB_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "abc")

    config = get_tmdb_config()

    assert config.api_key == "abc"
    assert config.region == "US"
    assert config.language is None
    assert config.resilience.base_url == TMDB_BASE_URL
    assert config.resilience.ratelimit is not None


def test_region_is_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "abc")
    monkeypatch.setenv("TMDB_REGION", "gb")
    monkeypatch.setenv("TMDB_LANGUAGE", "en-GB")

    config = get_tmdb_config()

    assert config.region == "GB"
    assert config.language == "en-GB"


@pytest.mark.parametrize("region", ["USA", "1A", "U"])
def test_invalid_region(monkeypatch: pytest.MonkeyPatch, region: str) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "abc")
    monkeypatch.setenv("TMDB_REGION", region)

    with pytest.raises(InvalidConfigurationError, match="TMDB_REGION"):
        get_tmdb_config()


def test_missing_key() -> None:
    with pytest.raises(MissingConfigurationError, match="TMDB_API_KEY"):
        get_tmdb_config()


def test_image_url_joins_paths() -> None:
    config = TmdbConfig(
        api_key="abc",
        resilience=default_tmdb_resilience(),
        image_base_url="https://image.tmdb.org/t/p/w500/",
    )

    assert config.image_url("/poster.jpg") == "https://image.tmdb.org/t/p/w500/poster.jpg"
    assert config.image_url(None) is None
    assert config.image_url("") is None
