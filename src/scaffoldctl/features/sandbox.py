"""Component sandbox (Storybook)."""

from __future__ import annotations

from scaffoldctl.features.base import Feature, FeatureContext

STORYBOOK_SCRIPTS = {
    "storybook": "storybook dev -p 6006",
    "build-storybook": "storybook build",
}


class SandboxFeature(Feature):
    name = "sandbox"
    message = "Add Storybook for component development and testing?"
    default = True
    order = 60

    def setup(self, ctx: FeatureContext) -> None:
        ctx.step("Adding Storybook...")
        ctx.run_tool("storybook@latest init --builder webpack5", interactive=True)
        # init usually adds these, but not always.
        ctx.merge_scripts(STORYBOOK_SCRIPTS)
        ctx.note("Start Storybook with: npm run storybook")
