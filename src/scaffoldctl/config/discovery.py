"""Locate the project and its ``scaffoldctl.toml``.

A project is the nearest directory, walking up from the start point, that
holds a ``package.json``. The config search walks up the same way but stops
at that boundary, so a config in a parent workspace does not leak into a
nested template. Without a manifest anywhere above, the search continues to
the filesystem root.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "scaffoldctl.toml"
CONFIG_ENV_VAR = "SCAFFOLDCTL_CONFIG"
MANIFEST_FILENAME = "package.json"


def _ancestors(start: Path | None) -> Iterator[Path]:
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_project_root(start: Path | None = None) -> Path | None:
    """Nearest directory at or above *start* (default: cwd) with a package.json."""
    for directory in _ancestors(start):
        if (directory / MANIFEST_FILENAME).is_file():
            return directory
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Find ``scaffoldctl.toml`` for the project containing *start*.

    ``SCAFFOLDCTL_CONFIG`` wins when set; a value naming a missing file means
    no config rather than falling back to the search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    for directory in _ancestors(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if (directory / MANIFEST_FILENAME).is_file():
            return None
    return None
