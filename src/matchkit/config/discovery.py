"""Config file discovery and loading.

Walk-up finder locates ``matchkit.toml``, or a ``pyproject.toml`` that
carries a ``[tool.matchkit]`` table, similar to how git finds .git/.
Supports the MATCHKIT_CONFIG env var override.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from matchkit.errors import ConfigError

CONFIG_FILENAME = "matchkit.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "MATCHKIT_CONFIG"

logger = logging.getLogger(__name__)


def _read_toml(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = _read_toml(pyproject)
    except ConfigError:
        logger.debug("Ignoring unreadable %s during discovery", pyproject)
        return False
    return isinstance(data.get("tool", {}).get("matchkit"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for matchkit configuration.

    In each directory ``matchkit.toml`` wins over ``pyproject.toml``; a
    pyproject only counts when it has a ``[tool.matchkit]`` table.
    Returns the path to the config file, or None if not found.
    Checks MATCHKIT_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config_data(path: Path | None) -> dict[str, Any]:
    """Return the matchkit settings table stored in *path*.

    A ``pyproject.toml`` contributes only its ``[tool.matchkit]`` table;
    any other file is read whole. Missing files yield an empty dict.
    """
    if path is None or not path.is_file():
        return {}
    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("matchkit", {})
        if not isinstance(table, dict):
            msg = f"[tool.matchkit] in {path} must be a table"
            raise ConfigError(msg)
        return table
    return data
