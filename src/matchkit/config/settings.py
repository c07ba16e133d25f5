"""Unified settings — env vars and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides passed by the caller
  2. Env vars     — ``MATCHKIT_*`` prefix
  3. TOML file    — ``matchkit.toml`` or ``[tool.matchkit]`` discovered via walk-up
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`matchkit.config.discovery`.

The process-wide instance is built lazily by :func:`get_settings` and
treated as read-only configuration; :func:`reset_settings` drops it together
with everything derived from it.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from matchkit.config.discovery import find_config, load_config_data

logger = logging.getLogger(__name__)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a TOML file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = load_config_data(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MatchkitSettings(BaseSettings):
    """Process-wide matchkit configuration.

    Attributes:
        null_literal: How the default formatter renders ``None``.
        max_value_length: Truncate rendered values longer than this many
            characters (None disables truncation).
        load_plugins: Load formatting plugins from the ``matchkit.plugins``
            entry-point group.
        verbose: Enable DEBUG-level matchkit logging when logging is
            configured through :func:`matchkit.config.logging.configure_logging`.
        log_json: Emit JSON log lines instead of console output.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MATCHKIT_",
        "extra": "ignore",
    }

    null_literal: str = "null"
    max_value_length: int | None = Field(default=None, ge=4)
    load_plugins: bool = True
    verbose: bool = False
    log_json: bool = False
    config_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def discover(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> MatchkitSettings:
        """Construct settings from the environment and discovered TOML.

        Uses *config_path* when it names an existing file, otherwise walks
        up from *start* (default: cwd). *overrides* take priority over
        every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        if toml_path is not None:
            logger.debug("Loading matchkit settings from %s", toml_path)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


_lock = threading.Lock()
_settings: MatchkitSettings | None = None


def get_settings() -> MatchkitSettings:
    """Return the process-wide settings, discovering them on first use."""
    global _settings
    with _lock:
        if _settings is None:
            _settings = MatchkitSettings.discover()
        return _settings


def reset_settings() -> None:
    """Forget cached settings and the default formatter built from them."""
    global _settings
    from matchkit.output.formatters import reset_default_formatter
    from matchkit.plugins.manager import reset_plugin_manager

    with _lock:
        _settings = None
    reset_default_formatter()
    reset_plugin_manager()
