"""Notifications (react-hot-toast): a toaster injected beside the app children."""

from __future__ import annotations

from scaffoldctl.features.base import Feature, FeatureContext


class NotificationsFeature(Feature):
    name = "notifications"
    message = "Add react-hot-toast for notifications?"
    default = True
    order = 20

    position = "top-center"
    duration_ms = 5000

    def setup(self, ctx: FeatureContext) -> None:
        ctx.step("Adding react-hot-toast...")
        ctx.install("react-hot-toast")

        ctx.render(
            "ToastProvider.tsx",
            "components/ToastProvider.tsx",
            position=self.position,
            duration_ms=self.duration_ms,
        )
        # Sibling of the children, not a wrapper.
        ctx.update_layout(
            'import { ToastProvider } from "@/components/ToastProvider";',
            "<ToastProvider />",
        )
