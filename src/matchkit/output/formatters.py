"""Value formatter — renders actual and expected values into descriptions.

Matchers never call ``repr`` directly: every literal in a description or
mismatch goes through a :class:`ValueFormatter`. The process-wide default is
built once from :class:`~matchkit.config.settings.MatchkitSettings`; any
formatting matcher also accepts ``formatter=`` to use a different one.

Rendering is delegated to the pluggy hooks in
:mod:`matchkit.plugins.hookspecs`, answered by default by
:class:`~matchkit.plugins.builtins.formatting.DefaultFormattingPlugin`.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from matchkit.config.settings import MatchkitSettings
    from matchkit.plugins.manager import PluginManager

_ELLIPSIS = "..."
# room for one character before the ellipsis
_MIN_VALUE_LENGTH = len(_ELLIPSIS) + 1


@dataclass(frozen=True)
class ValueFormatter:
    """Callable ``value -> str`` used for every literal in matcher output.

    Attributes:
        null_literal: Rendering of ``None``.
        max_value_length: Truncate longer renderings, ending them with
            ``"..."``. None disables truncation.
        plugin_manager: Manager whose rendering hooks are used. None means
            the process-wide manager.
    """

    null_literal: str = "null"
    max_value_length: int | None = None
    plugin_manager: PluginManager | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_value_length is not None and self.max_value_length < _MIN_VALUE_LENGTH:
            msg = (
                f"max_value_length must be at least {_MIN_VALUE_LENGTH}, "
                f"got {self.max_value_length}"
            )
            raise ValueError(msg)

    @classmethod
    def from_settings(cls, settings: MatchkitSettings) -> ValueFormatter:
        return cls(
            null_literal=settings.null_literal,
            max_value_length=settings.max_value_length,
        )

    def __call__(self, value: Any) -> str:
        text = self._plugins().hook.matchkit_describe_value(value=value, formatter=self)
        if text is None:
            text = str(value)
        return self._truncate(text)

    def describe_type(self, value_type: type) -> str:
        """Return the display name of *value_type*, e.g. ``"float"``."""
        name = self._plugins().hook.matchkit_type_name(value_type=value_type)
        return name if name is not None else value_type.__name__

    def describe_type_of(self, value: Any) -> str:
        """Return ``"a <type name>"`` for the runtime type of *value*."""
        return f"a {self.describe_type(type(value))}"

    def _plugins(self) -> PluginManager:
        if self.plugin_manager is not None:
            return self.plugin_manager
        from matchkit.plugins.manager import get_plugin_manager

        return get_plugin_manager()

    def _truncate(self, text: str) -> str:
        limit = self.max_value_length
        if limit is None or len(text) <= limit:
            return text
        return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS


_lock = threading.Lock()
_default: ValueFormatter | None = None


def default_formatter() -> ValueFormatter:
    """Return the process-wide formatter, built from settings on first use."""
    global _default
    from matchkit.config.settings import get_settings

    settings = get_settings()
    with _lock:
        if _default is None:
            _default = ValueFormatter.from_settings(settings)
        return _default


def reset_default_formatter() -> None:
    """Drop the cached default formatter."""
    global _default
    with _lock:
        _default = None


def describe(value: Any) -> str:
    """Render *value* with the default formatter."""
    return default_formatter()(value)
