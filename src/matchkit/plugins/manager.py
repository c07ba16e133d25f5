"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``matchkit.plugins`` group. The built-in formatting plugin is always
registered so the rendering hooks never come back empty.
"""

from __future__ import annotations

import inspect
import logging
import threading

import pluggy

from matchkit.plugins.builtins import DefaultFormattingPlugin
from matchkit.plugins.hookspecs import MatchkitHookSpec

PROJECT_NAME = "matchkit"
ENTRY_POINT_GROUP = "matchkit.plugins"
BUILTIN_FORMATTING = "matchkit.builtin.formatting"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(MatchkitHookSpec)
        self._pm.register(DefaultFormattingPlugin(), name=BUILTIN_FORMATTING)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``matchkit.plugins`` entry-point group.

        Returns a list of registered plugin names.
        """
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load entry-point plugins", exc_info=True)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching rendering hooks."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("matchkit")`` sets a ``matchkit_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "matchkit_impl", None):
                return True
        return False


_lock = threading.Lock()
_manager: PluginManager | None = None


def get_plugin_manager() -> PluginManager:
    """Return the process-wide plugin manager, loading plugins on first use.

    Entry-point discovery is skipped when ``load_plugins`` is disabled in
    :class:`~matchkit.config.settings.MatchkitSettings`.
    """
    global _manager
    from matchkit.config.settings import get_settings

    load_plugins = get_settings().load_plugins
    with _lock:
        if _manager is None:
            manager = PluginManager()
            if load_plugins:
                manager.discover_and_load()
            _manager = manager
        return _manager


def reset_plugin_manager() -> None:
    """Drop the process-wide plugin manager."""
    global _manager
    with _lock:
        _manager = None
