"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .notion import NotionConfig, StatusLabels, get_notion_config
from .tmdb import TmdbConfig, get_tmdb_config

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "NotionConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StatusLabels",
    "TmdbConfig",
    "configure_logging",
    "get_notion_config",
    "get_tmdb_config",
    "optional_env_var",
    "require_env_vars",
]
