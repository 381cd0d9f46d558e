"""Pluggy hook specifications for scaffoldctl feature discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from scaffoldctl.features.base import Feature

hookspec = pluggy.HookspecMarker("scaffoldctl")


class ScaffoldHookSpec:
    """Hook specifications for the scaffoldctl plugin system."""

    @hookspec
    def register_features(self) -> list[Feature] | None:
        """Return feature instances to offer during ``scaffoldctl setup``."""
