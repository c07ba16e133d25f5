"""Pluggy hook specifications for value and type rendering.

Both hooks are ``firstresult``: the first plugin returning a non-None
string wins. The built-in formatting plugin is registered last and always
answers, so third-party plugins only need to handle the values they care
about.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from matchkit.output.formatters import ValueFormatter

hookspec = pluggy.HookspecMarker("matchkit")


class MatchkitHookSpec:
    """Hook specifications for the matchkit plugin system."""

    @hookspec(firstresult=True)
    def matchkit_describe_value(self, value: Any, formatter: ValueFormatter) -> str | None:
        """Render *value* for a description or mismatch message.

        *formatter* renders nested values (container elements) so plugins
        keep the caller's configuration.
        """

    @hookspec(firstresult=True)
    def matchkit_type_name(self, value_type: type) -> str | None:
        """Return the display name for *value_type* (used by ``is_a``)."""
