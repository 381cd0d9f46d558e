"""Extension layer: feature plugins via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from scaffoldctl.plugins.manager import PluginManager, discover_features

__all__ = ["PluginManager", "discover_features"]
