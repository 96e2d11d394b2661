"""Tests for ${ENV_VAR} interpolation."""

import pytest

from job_relay.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_collects_all_missing_without_duplicates(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("JR_A", raising=False)
        monkeypatch.delenv("JR_B", raising=False)
        monkeypatch.setenv("JR_C", "set")

        missing = collect_missing_vars(
            {"x": "${JR_A}", "y": ["${JR_B}", "${JR_A}"], "z": "${JR_C}", "n": 3}
        )

        assert missing == ["JR_A", "JR_B"]


class TestInterpolate:
    def test_substitutes_nested_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JR_HOST", "api.example")

        result = interpolate({"endpoint": {"url": "https://${JR_HOST}/x"}, "n": [1, True]})

        assert result == {"endpoint": {"url": "https://api.example/x"}, "n": [1, True]}


class TestFallbacks:
    """${VAR:-fallback} never counts as missing and resolves when unset."""

    def test_fallback_is_not_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JR_TIMEOUT", raising=False)

        assert collect_missing_vars({"t": "${JR_TIMEOUT:-600000}"}) == []

    def test_fallback_used_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JR_TIMEOUT", raising=False)

        assert interpolate("${JR_TIMEOUT:-600000}") == "600000"

    def test_value_wins_over_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JR_TIMEOUT", "5")

        assert interpolate("${JR_TIMEOUT:-600000}") == "5"

    def test_empty_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JR_KEY", raising=False)

        assert interpolate("key=${JR_KEY:-}") == "key="
