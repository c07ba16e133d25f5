"""Shared pytest fixtures and test helpers for matchkit tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from matchkit.config.settings import reset_settings
from matchkit.matchers.base import Matcher
from matchkit.result import MATCH, MatchResult


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep every test away from real config files and MATCHKIT_* variables.

    Points MATCHKIT_CONFIG at a missing file so walk-up discovery finds
    nothing, and drops the cached settings, formatter, and plugin manager.
    """
    for key in list(os.environ):
        if key.startswith("MATCHKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("MATCHKIT_CONFIG", str(tmp_path / "no-such-matchkit.toml"))
    reset_settings()
    yield
    reset_settings()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class CountingMatcher(Matcher[Any]):
    """Stub matcher with a fixed outcome that counts its applications."""

    def __init__(self, *, matches: bool, name: str = "stub") -> None:
        self.matches = matches
        self.name = name
        self.calls = 0

    @property
    def description(self) -> str:
        return f"{self.name} description"

    @property
    def negated_description(self) -> str:
        return f"{self.name} negated description"

    def apply(self, actual: Any) -> MatchResult:
        self.calls += 1
        if self.matches:
            return MATCH
        return self._mismatch_was(actual)


@pytest.fixture
def matching_stub() -> CountingMatcher:
    return CountingMatcher(matches=True, name="matching")


@pytest.fixture
def mismatching_stub() -> CountingMatcher:
    return CountingMatcher(matches=False, name="mismatching")
