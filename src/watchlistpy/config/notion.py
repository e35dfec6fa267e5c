"""Notion configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

NOTION_BASE_URL = "https://api.notion.com/v1/"
NOTION_VERSION = "2022-06-28"
NOTION_TIMEOUT_SECONDS = 15.0

DEFAULT_TO_WATCH_LABEL = "🧡 To Watch"
DEFAULT_WATCHING_LABEL = "💛Watching"
DEFAULT_WATCHED_LABEL = "💚Watched"

# statuses where Notion rejected the request before doing any work
NOTION_WRITE_RETRY_STATUSES = frozenset({429, 503})


@dataclass(frozen=True, slots=True)
class StatusLabels:
    """Select option names used by the database's ``Status`` property."""

    to_watch: str = DEFAULT_TO_WATCH_LABEL
    watching: str = DEFAULT_WATCHING_LABEL
    watched: str = DEFAULT_WATCHED_LABEL


@dataclass(frozen=True, slots=True)
class NotionConfig:
    token: str
    database_id: str
    resilience: ResilienceConfig
    status_labels: StatusLabels = field(default_factory=StatusLabels)


def notion_write_retry() -> RetryPolicy:
    """Retry page creation and block appends only when Notion did nothing.

    A timeout or dropped connection may hide a committed write, so those are
    never retried.
    """

    return RetryPolicy(
        status_forcelist=NOTION_WRITE_RETRY_STATUSES,
        retry_on_exceptions=(),
    )


def notion_resilience(token: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="notion",
        base_url=NOTION_BASE_URL,
        timeout_seconds=NOTION_TIMEOUT_SECONDS,
        # Notion allows an average of three requests per second per integration
        ratelimit=RateLimit(max_calls=3, per_seconds=1.0),
        default_headers={
            "Authorization": f"Bearer {token}",
            "Notion-Version": NOTION_VERSION,
        },
        write_retry=notion_write_retry(),
    )


def get_notion_config(*, resilience: ResilienceConfig | None = None) -> NotionConfig:
    values = require_env_vars(("NOTION_TOKEN", "NOTION_DB_ID"))
    token = values["NOTION_TOKEN"]
    labels = StatusLabels(
        to_watch=optional_env_var("NOTION_STATUS_TO_WATCH", DEFAULT_TO_WATCH_LABEL),
        watching=optional_env_var("NOTION_STATUS_WATCHING", DEFAULT_WATCHING_LABEL),
        watched=optional_env_var("NOTION_STATUS_WATCHED", DEFAULT_WATCHED_LABEL),
    )
    return NotionConfig(
        token=token,
        database_id=values["NOTION_DB_ID"],
        resilience=resilience or notion_resilience(token),
        status_labels=labels,
    )
