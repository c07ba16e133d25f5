"""Tests for PluginManager — discovery, registration, and hook relay."""

from __future__ import annotations

from typing import Any

import pluggy
import pytest

from matchkit.output.formatters import ValueFormatter
from matchkit.plugins.manager import (
    BUILTIN_FORMATTING,
    PluginManager,
    get_plugin_manager,
    reset_plugin_manager,
)

hookimpl = pluggy.HookimplMarker("matchkit")


class _DummyPlugin:
    """Minimal plugin for registration tests."""

    @hookimpl
    def matchkit_type_name(self, value_type: type) -> str | None:
        return None


class _Celsius:
    def __init__(self, degrees: float) -> None:
        self.degrees = degrees


class _CelsiusPlugin:
    @hookimpl
    def matchkit_describe_value(self, value: Any, formatter: ValueFormatter) -> str | None:
        if isinstance(value, _Celsius):
            return f"{value.degrees}°C"
        return None

    @hookimpl
    def matchkit_type_name(self, value_type: type) -> str | None:
        if value_type is _Celsius:
            return "temperature"
        return None


class _ClassOnlyPlugin:
    @hookimpl
    def matchkit_type_name(self, value_type: type) -> str | None:
        return "class-only" if value_type is bytes else None


class TestPluginManager:
    """Tests for the PluginManager class."""

    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "matchkit_describe_value")
        assert hasattr(pm.hook, "matchkit_type_name")

    def test_builtin_always_registered(self) -> None:
        pm = PluginManager()
        assert BUILTIN_FORMATTING in pm.list_plugin_names()

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="dummy")
        pm.unregister(plugin)
        assert "dummy" not in pm.list_plugin_names()

    def test_get_plugins_returns_registered(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="test")
        assert plugin in pm.get_plugins()

    def test_is_loaded_false_before_discover(self) -> None:
        pm = PluginManager()
        assert pm.is_loaded is False

    def test_discover_marks_loaded(self) -> None:
        pm = PluginManager()
        names = pm.discover_and_load()
        assert pm.is_loaded is True
        assert BUILTIN_FORMATTING in names

    def test_discover_survives_broken_entry_points(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()

        def _boom(group: str) -> int:
            raise RuntimeError("broken distribution")

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", _boom)
        with caplog.at_level("WARNING"):
            names = pm.discover_and_load()
        assert BUILTIN_FORMATTING in names
        assert "Failed to load entry-point plugins" in caplog.text

    def test_class_plugins_are_instantiated(self) -> None:
        pm = PluginManager()
        pm._pm.register(_ClassOnlyPlugin, name="class-only")
        pm.discover_and_load()
        assert _ClassOnlyPlugin not in pm.get_plugins()
        assert any(isinstance(p, _ClassOnlyPlugin) for p in pm.get_plugins())
        assert pm.hook.matchkit_type_name(value_type=bytes) == "class-only"


class TestHookDispatch:
    def test_plugin_beats_builtin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_CelsiusPlugin(), name="celsius")
        formatter = ValueFormatter(plugin_manager=pm)
        assert formatter(_Celsius(21.5)) == "21.5°C"
        assert formatter.describe_type_of(_Celsius(0)) == "a temperature"

    def test_builtin_answers_when_plugin_declines(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_CelsiusPlugin(), name="celsius")
        formatter = ValueFormatter(plugin_manager=pm)
        assert formatter([_Celsius(3), None]) == "[3°C, null]"
        assert formatter.describe_type(int) == "int"


class TestProcessWideManager:
    def test_cached(self) -> None:
        assert get_plugin_manager() is get_plugin_manager()

    def test_reset_builds_new_manager(self) -> None:
        first = get_plugin_manager()
        reset_plugin_manager()
        assert get_plugin_manager() is not first

    def test_loads_plugins_by_default(self) -> None:
        assert get_plugin_manager().is_loaded is True

    def test_load_plugins_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from matchkit.config.settings import reset_settings

        monkeypatch.setenv("MATCHKIT_LOAD_PLUGINS", "false")
        reset_settings()
        pm = get_plugin_manager()
        assert pm.is_loaded is False
        assert pm.list_plugin_names() == [BUILTIN_FORMATTING]
