"""Payments (Stripe): SDK install plus publishable/secret key prompts."""

from __future__ import annotations

from scaffoldctl.domain.envfile import EnvDeclaration, Visibility
from scaffoldctl.features.base import Feature, FeatureContext
from scaffoldctl.infrastructure.prompts import Question

_INSTRUCTIONS = """\
Stripe setup:
  1. Go to https://dashboard.stripe.com/apikeys
  2. Sign in or create a Stripe account
  3. Make sure the dashboard is in Test Mode for development
  4. Copy the publishable key and the secret key"""


class PaymentsFeature(Feature):
    name = "payments"
    message = "Add Stripe for payments?"
    default = False
    order = 10

    def setup(self, ctx: FeatureContext) -> None:
        ctx.step("Adding Stripe...")
        ctx.install("stripe", "@stripe/stripe-js")

        ctx.step(_INSTRUCTIONS)
        keys = ctx.prompt(
            [
                Question(
                    "publishable_key",
                    "Stripe publishable key",
                    default="pk_test_",
                    kind="input",
                ),
                Question(
                    "secret_key",
                    "Stripe secret key",
                    default="sk_test_",
                    kind="input",
                ),
            ]
        )
        ctx.merge_env(
            [
                EnvDeclaration(
                    key="NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY",
                    value=str(keys["publishable_key"]),
                    description="Your Stripe publishable key (starts with pk_)",
                ),
                EnvDeclaration(
                    key="STRIPE_SECRET_KEY",
                    value=str(keys["secret_key"]),
                    description="Your Stripe secret key (starts with sk_)",
                    visibility=Visibility.SECRET,
                ),
            ],
            "Stripe Configuration",
        )
        paths = ctx.project.settings.paths
        ctx.note(f"Verify your Stripe keys in {paths.env_public} and {paths.env_secret}")
        ctx.note("For production, repeat setup with live keys")
