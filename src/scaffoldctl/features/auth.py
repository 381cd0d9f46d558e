"""Authentication (Clerk): env keys, route middleware, pages, and provider."""

from __future__ import annotations

from scaffoldctl.domain.envfile import EnvDeclaration, Visibility
from scaffoldctl.features.base import Feature, FeatureContext

CLERK_IMPORT = (
    "import { ClerkProvider, SignInButton, SignUpButton, SignedIn, SignedOut, "
    'UserButton } from "@clerk/nextjs";'
)

CLERK_PROVIDER = """\
<ClerkProvider>
    <header className="flex justify-end items-center p-4 gap-4 h-16">
        <SignedOut>
            <SignInButton />
            <SignUpButton />
        </SignedOut>
        <SignedIn>
            <UserButton />
        </SignedIn>
    </header>
    {children}
</ClerkProvider>"""


class AuthFeature(Feature):
    name = "auth"
    message = "Add Clerk for authentication?"
    default = True
    order = 50

    sign_in_url = "/sign-in"
    sign_up_url = "/sign-up"

    def setup(self, ctx: FeatureContext) -> None:
        ctx.step("Adding Clerk authentication...")
        ctx.install("@clerk/nextjs")

        ctx.merge_env(
            [
                EnvDeclaration(key="NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY", value="your_publishable_key"),
                EnvDeclaration(
                    key="CLERK_SECRET_KEY",
                    value="your_secret_key",
                    visibility=Visibility.SECRET,
                ),
                EnvDeclaration(key="NEXT_PUBLIC_CLERK_SIGN_IN_URL", value=self.sign_in_url),
                EnvDeclaration(key="NEXT_PUBLIC_CLERK_SIGN_UP_URL", value=self.sign_up_url),
                EnvDeclaration(key="NEXT_PUBLIC_CLERK_AFTER_SIGN_IN_URL", value="/"),
                EnvDeclaration(key="NEXT_PUBLIC_CLERK_AFTER_SIGN_UP_URL", value="/"),
            ],
            "Clerk Authentication (Get these from https://dashboard.clerk.com)",
        )

        urls = {"sign_in_url": self.sign_in_url, "sign_up_url": self.sign_up_url}
        ctx.render("middleware.ts", "middleware.ts", **urls)
        ctx.render("auth.ts", "lib/auth.ts", **urls)
        ctx.render("sign-in-page.tsx", "app/sign-in/[[...sign-in]]/page.tsx")
        ctx.render("sign-up-page.tsx", "app/sign-up/[[...sign-up]]/page.tsx")

        ctx.update_layout(CLERK_IMPORT, CLERK_PROVIDER)

        paths = ctx.project.settings.paths
        ctx.note(f"Add your Clerk keys to {paths.env_public} and {paths.env_secret}")
        ctx.note("Visit http://localhost:3000 and test the auth flow")
        ctx.note("Use getUser() from lib/auth.ts to protect routes")
