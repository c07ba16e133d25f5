"""Built-in formatting plugin — the default rendering of values and types.

Registered ``trylast`` so any third-party plugin answering the same hook
takes precedence.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter

hookimpl = pluggy.HookimplMarker("matchkit")

# ids of the containers currently being rendered
_rendering: ContextVar[frozenset[int]] = ContextVar("matchkit_rendering", default=frozenset())


def quote_string(text: str) -> str:
    """Double-quote *text*, escaping backslashes and double quotes.

    Examples:
        >>> quote_string('hello "nat"')
        '"hello \\\\"nat\\\\""'
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class DefaultFormattingPlugin:
    """Renders None, strings, and builtin containers; ``str()`` for the rest."""

    @hookimpl(trylast=True)
    def matchkit_describe_value(self, value: Any, formatter: ValueFormatter) -> str:
        if value is None:
            return formatter.null_literal
        if isinstance(value, str):
            return quote_string(value)
        if isinstance(value, (dict, list, tuple, set, frozenset)):
            return self._describe_container(value, formatter)
        return str(value)

    @hookimpl(trylast=True)
    def matchkit_type_name(self, value_type: type) -> str:
        return value_type.__name__

    def _describe_container(self, value: Any, formatter: ValueFormatter) -> str:
        """Render a builtin container, showing a container nested in itself as ``[...]``."""
        active = _rendering.get()
        if id(value) in active:
            if isinstance(value, list):
                return "[...]"
            if isinstance(value, tuple):
                return "(...)"
            return "{...}"
        token = _rendering.set(active | {id(value)})
        try:
            return self._render_items(value, formatter)
        finally:
            _rendering.reset(token)

    @staticmethod
    def _render_items(value: Any, formatter: ValueFormatter) -> str:
        if isinstance(value, dict):
            items = ", ".join(f"{formatter(k)}: {formatter(v)}" for k, v in value.items())
            return f"{{{items}}}"
        if isinstance(value, list):
            return f"[{', '.join(formatter(v) for v in value)}]"
        if isinstance(value, tuple):
            if len(value) == 1:
                return f"({formatter(value[0])},)"
            return f"({', '.join(formatter(v) for v in value)})"
        if not value:
            return f"{type(value).__name__}()"
        # Sorted rendering keeps set messages stable across hash seeds.
        return f"{{{', '.join(sorted(formatter(v) for v in value))}}}"
