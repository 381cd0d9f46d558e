"""Plugin discovery and feature collection.

Discovery: the built-in feature plugin plus pip-installed plugins from the
``scaffoldctl.features`` entry-point group (loaded by pluggy).
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable

import pluggy

from scaffoldctl.features.base import Feature
from scaffoldctl.plugins.hookspecs import ScaffoldHookSpec

PROJECT_NAME = "scaffoldctl"
ENTRY_POINT_GROUP = "scaffoldctl.features"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin registration and feature collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ScaffoldHookSpec)

    def load_builtins(self) -> None:
        from scaffoldctl.plugins.builtins import BuiltinFeaturesPlugin

        self.register_plugin(BuiltinFeaturesPlugin(), name="builtin")

    def load_entrypoints(self) -> list[str]:
        """Load third-party plugins. A broken plugin is logged and skipped."""
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load %s entry points", ENTRY_POINT_GROUP, exc_info=True)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_features(self, *, disabled: Iterable[str] = ()) -> list[Feature]:
        """Gather features from every plugin, sorted by ``order``.

        Later-registered plugins answer first, so an entry-point plugin that
        reuses a built-in feature name replaces the built-in one.
        """
        skip = set(disabled)
        seen: set[str] = set()
        features: list[Feature] = []
        for impl in self._pm.hook.register_features.get_hookimpls()[::-1]:
            plugin_name = impl.plugin_name
            try:
                provided = impl.function() or []
            except Exception:
                logger.warning(
                    "Failed to collect features from plugin %s", plugin_name, exc_info=True
                )
                continue
            for feature in provided:
                if not isinstance(feature, Feature):
                    logger.warning("Plugin %s returned a non-Feature: %r", plugin_name, feature)
                    continue
                if feature.name in seen or feature.name in skip:
                    continue
                seen.add(feature.name)
                features.append(feature)
        return sorted(features, key=lambda f: f.order)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
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


def discover_features(*, load_entrypoints: bool = True, disabled: Iterable[str] = ()) -> list[Feature]:
    """Return the features offered by ``setup``."""
    manager = PluginManager()
    manager.load_builtins()
    if load_entrypoints:
        manager.load_entrypoints()
    return manager.collect_features(disabled=disabled)
