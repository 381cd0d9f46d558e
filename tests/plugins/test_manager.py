"""Tests for PluginManager: registration and feature collection."""

from __future__ import annotations

from typing import Any

import pluggy
import pytest

from scaffoldctl.features.base import Feature, FeatureContext
from scaffoldctl.plugins.manager import ENTRY_POINT_GROUP, PluginManager, discover_features

hookimpl = pluggy.HookimplMarker("scaffoldctl")


class _Analytics(Feature):
    name = "analytics"
    message = "Add analytics?"
    default = True
    order = 55

    def setup(self, ctx: FeatureContext) -> None:
        ctx.install("@vercel/analytics")


class _CustomAuth(Feature):
    name = "auth"
    message = "Add custom auth?"
    order = 50

    def setup(self, ctx: FeatureContext) -> None:
        pass


class _AnalyticsPlugin:
    @hookimpl
    def register_features(self) -> list[Feature]:
        return [_Analytics()]


class _OverridePlugin:
    @hookimpl
    def register_features(self) -> list[Feature]:
        return [_CustomAuth()]


class _BadPlugin:
    @hookimpl
    def register_features(self) -> list[Any]:
        return ["not a feature"]


class _RaisingPlugin:
    @hookimpl
    def register_features(self) -> list[Feature]:
        raise RuntimeError("plugin bug")


def _names(features: list[Feature]) -> list[str]:
    return [f.name for f in features]


class TestPluginManager:
    def test_builtins(self) -> None:
        pm = PluginManager()
        pm.load_builtins()
        assert pm.list_plugin_names() == ["builtin"]
        assert _names(pm.collect_features()) == [
            "payments",
            "notifications",
            "components",
            "database",
            "auth",
            "sandbox",
        ]

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_AnalyticsPlugin())
        assert "_AnalyticsPlugin" in pm.list_plugin_names()

    def test_plugin_features_sorted_by_order(self) -> None:
        pm = PluginManager()
        pm.load_builtins()
        pm.register_plugin(_AnalyticsPlugin(), name="analytics")
        names = _names(pm.collect_features())
        assert names.index("auth") < names.index("analytics") < names.index("sandbox")

    def test_later_plugin_replaces_builtin(self) -> None:
        pm = PluginManager()
        pm.load_builtins()
        pm.register_plugin(_OverridePlugin(), name="override")
        features = pm.collect_features()
        auth = [f for f in features if f.name == "auth"]
        assert len(auth) == 1
        assert isinstance(auth[0], _CustomAuth)

    def test_disabled(self) -> None:
        pm = PluginManager()
        pm.load_builtins()
        assert "sandbox" not in _names(pm.collect_features(disabled=["sandbox"]))

    def test_non_feature_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_BadPlugin(), name="bad")
        with caplog.at_level("WARNING", logger="scaffoldctl"):
            assert pm.collect_features() == []
        assert "non-Feature" in caplog.text

    def test_raising_plugin_is_skipped(self) -> None:
        pm = PluginManager()
        pm.load_builtins()
        pm.register_plugin(_RaisingPlugin(), name="raising")
        assert len(pm.collect_features()) == 6


class TestEntryPoints:
    def test_class_plugins_are_instantiated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _load(self: pluggy.PluginManager, group: str, name: str | None = None) -> int:
            assert group == ENTRY_POINT_GROUP
            self.register(_AnalyticsPlugin, name="analytics")
            return 1

        monkeypatch.setattr(pluggy.PluginManager, "load_setuptools_entrypoints", _load)
        pm = PluginManager()
        assert pm.load_entrypoints() == ["analytics"]
        assert _names(pm.collect_features()) == ["analytics"]

    def test_loader_failure_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def _load(self: pluggy.PluginManager, group: str, name: str | None = None) -> int:
            raise ImportError("broken dist")

        monkeypatch.setattr(pluggy.PluginManager, "load_setuptools_entrypoints", _load)
        with caplog.at_level("WARNING", logger="scaffoldctl"):
            features = discover_features()
        assert len(features) == 6
        assert ENTRY_POINT_GROUP in caplog.text

    def test_discover_without_entrypoints(self) -> None:
        assert len(discover_features(load_entrypoints=False, disabled=["auth"])) == 5
