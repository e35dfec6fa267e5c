from __future__ import annotations

from dataclasses import replace

import pytest

from watchlistpy.config import NotionConfig, RetryPolicy, StatusLabels, TmdbConfig
from watchlistpy.config.notion import notion_resilience
from watchlistpy.config.tmdb import default_tmdb_resilience

from tests.helpers.watchlist import InMemoryRecordStore


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def tmdb_config() -> TmdbConfig:
    # no retries and no rate limit so failing requests return immediately
    resilience = replace(default_tmdb_resilience(), retry=RetryPolicy(total=0), ratelimit=None)
    return TmdbConfig(api_key="test-key", resilience=resilience, region="US")


@pytest.fixture
def notion_config() -> NotionConfig:
    resilience = replace(
        notion_resilience("secret-token"),
        retry=RetryPolicy(total=0),
        write_retry=RetryPolicy(total=0),
        ratelimit=None,
    )
    return NotionConfig(
        token="secret-token",
        database_id="db-123",
        resilience=resilience,
        status_labels=StatusLabels(),
    )
