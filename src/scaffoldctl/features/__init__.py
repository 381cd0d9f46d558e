"""Built-in feature modules, in prompt order."""

from __future__ import annotations

from scaffoldctl.features.auth import AuthFeature
from scaffoldctl.features.base import Feature, FeatureContext
from scaffoldctl.features.components import ComponentsFeature
from scaffoldctl.features.database import DatabaseFeature
from scaffoldctl.features.notifications import NotificationsFeature
from scaffoldctl.features.payments import PaymentsFeature
from scaffoldctl.features.sandbox import SandboxFeature

BUILTIN_FEATURES: tuple[type[Feature], ...] = (
    PaymentsFeature,
    NotificationsFeature,
    ComponentsFeature,
    DatabaseFeature,
    AuthFeature,
    SandboxFeature,
)

__all__ = [
    "BUILTIN_FEATURES",
    "AuthFeature",
    "ComponentsFeature",
    "DatabaseFeature",
    "Feature",
    "FeatureContext",
    "NotificationsFeature",
    "PaymentsFeature",
    "SandboxFeature",
]
