"""Shared logging helpers for watchlistpy."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "WATCHLISTPY_LOG_LEVEL"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``WATCHLISTPY_LOG_LEVEL`` (a level name such as ``DEBUG``) or INFO,
    with a terse format suitable for CLI output. Pass ``force=True`` to reconfigure
    during tests or specialised entry points.
    """

    if level is None:
        name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
        resolved = logging.getLevelName(name)
        level = resolved if isinstance(resolved, int) else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
