"""Component library (shadcn/ui) with a theme provider for dark mode."""

from __future__ import annotations

from scaffoldctl.features.base import Feature, FeatureContext

THEME_PROVIDER = """\
<ThemeProvider
    attribute="class"
    defaultTheme="system"
    enableSystem
    disableTransitionOnChange
>
    {children}
</ThemeProvider>"""


class ComponentsFeature(Feature):
    name = "components"
    message = "Add shadcn/ui components?"
    default = True
    order = 30

    components = ("button", "dropdown-menu")

    def setup(self, ctx: FeatureContext) -> None:
        ctx.step("Adding shadcn/ui...")
        ctx.run_tool("shadcn@latest init", interactive=True)

        ctx.step("Installing dark mode dependencies...")
        ctx.install("next-themes", "lucide-react", flags="--force")

        for component in self.components:
            ctx.step(f"Adding {component} component...")
            ctx.run_tool(f"shadcn@latest add {component}", interactive=True)

        ctx.step("Setting up ThemeProvider...")
        ctx.render("theme-provider.tsx", "components/theme-provider.tsx")
        ctx.update_layout(
            'import { ThemeProvider } from "@/components/theme-provider";',
            THEME_PROVIDER,
        )
        ctx.ensure_layout_attribute("html", "suppressHydrationWarning")

        ctx.note("Add more components with: npx shadcn@latest add [component-name]")
