"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from matchkit import assert_that, equal_to, throws
from matchkit.config.logging import configure_logging
from matchkit.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    matchkit = logging.getLogger("matchkit")
    matchkit_level = matchkit.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    matchkit.setLevel(matchkit_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("matchkit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("matchkit").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("matchkit.test")
        log.warning("hello world", key="val")
        # Smoke test only; the format depends on the terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("matchkit.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "matchkit.test"
        assert "timestamp" in parsed

    def test_throws_capture_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        def block() -> None:
            raise KeyError("missing")

        assert_that(block, throws(KeyError))

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip().splitlines()[-1])
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "matchkit.matchers.raising"
        assert "KeyError" in parsed["event"]

    def test_quiet_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        with pytest.raises(AssertionError):
            assert_that(1, equal_to(2))
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1

    def test_defaults_come_from_settings(
        self, monkeypatch: pytest.MonkeyPatch, capfd: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("MATCHKIT_VERBOSE", "true")
        monkeypatch.setenv("MATCHKIT_LOG_JSON", "true")
        reset_settings()
        configure_logging()
        assert logging.getLogger("matchkit").level == logging.DEBUG
        structlog.get_logger("matchkit.test").debug("from settings")
        assert json.loads(capfd.readouterr().err.strip())["event"] == "from settings"

    def test_explicit_arguments_beat_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MATCHKIT_VERBOSE", "true")
        reset_settings()
        configure_logging(verbose=False)
        assert logging.getLogger("matchkit").level == logging.WARNING
