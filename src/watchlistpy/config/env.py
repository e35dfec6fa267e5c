"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _read(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank.

    All names are checked before raising so a single error lists every gap.
    """

    missing = [name for name in names if _read(name) is None]
    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return {name: value for name in names if (value := _read(name)) is not None}


def optional_env_var(name: str, default: str) -> str:
    """Return ``name`` from the environment, or ``default`` when unset or blank."""

    value = _read(name)
    return default if value is None else value
