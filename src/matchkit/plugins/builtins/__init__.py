"""Plugins shipped with matchkit."""

from matchkit.plugins.builtins.formatting import DefaultFormattingPlugin

__all__ = ["DefaultFormattingPlugin"]
