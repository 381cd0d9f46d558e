"""Built-in plugin exposing the bundled feature modules."""

from __future__ import annotations

import pluggy

from scaffoldctl.features import BUILTIN_FEATURES
from scaffoldctl.features.base import Feature

hookimpl = pluggy.HookimplMarker("scaffoldctl")


class BuiltinFeaturesPlugin:
    """Registers payments, notifications, components, database, auth, sandbox."""

    @hookimpl
    def register_features(self) -> list[Feature]:
        return [feature_cls() for feature_cls in BUILTIN_FEATURES]
