"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, scaffoldctl.toml only contains
overrides. A fresh template needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- scaffoldctl.toml sections ---


class PathsConfig(BaseModel):
    """[paths] section: project-relative file locations."""

    model_config = {"frozen": True}

    layout: str = "app/layout.tsx"
    env_public: str = ".env"
    env_secret: str = ".env.local"
    # Redacted copy of every key for committing; empty disables it.
    env_example: str = ".env.example"
    manifest: str = "package.json"
    directories: list[str] = Field(
        default_factory=lambda: ["components", "lib", "styles", "types"]
    )


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    placeholder: str = "{children}"
    region_tag: str = "body"


class CommandsConfig(BaseModel):
    """[commands] section."""

    model_config = {"frozen": True}

    package_manager: str = "npm"
    runner: str = "npx"

    def install(self, *packages: str, flags: str = "") -> str:
        """Build an install command line for *packages*."""
        parts = [self.package_manager, "install", *packages]
        if flags:
            parts.append(flags)
        return " ".join(parts)

    def run(self, command: str) -> str:
        """Build a one-off package execution command line."""
        return f"{self.runner} {command}"


class FeaturesConfig(BaseModel):
    """[features] section.

    ``defaults`` overrides the built-in prompt default per feature name.
    ``disabled`` hides features from the prompt entirely.
    """

    model_config = {"frozen": True}

    defaults: dict[str, bool] = Field(default_factory=dict)
    disabled: list[str] = Field(default_factory=list)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

