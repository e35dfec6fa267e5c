from __future__ import annotations

import pytest

from watchlistpy.config import MissingConfigurationError, optional_env_var, require_env_vars


def test_require_env_vars_returns_stripped_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_B", raising=False)
    monkeypatch.setenv("MISSING_A", "   ")
    monkeypatch.setenv("PRESENT", "x")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["PRESENT", "MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)
    assert "PRESENT" not in str(exc.value)


def test_optional_env_var_falls_back_on_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPTIONAL_VAR", "")

    assert optional_env_var("OPTIONAL_VAR", "fallback") == "fallback"

    monkeypatch.setenv("OPTIONAL_VAR", "set")

    assert optional_env_var("OPTIONAL_VAR", "fallback") == "set"
