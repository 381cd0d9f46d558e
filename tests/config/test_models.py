"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from scaffoldctl.config.models import CommandsConfig, LayoutConfig, PathsConfig, PluginsConfig


class TestDefaults:
    def test_paths(self) -> None:
        paths = PathsConfig()
        assert paths.env_public == ".env"
        assert paths.env_secret == ".env.local"
        assert paths.env_example == ".env.example"
        assert paths.directories == ["components", "lib", "styles", "types"]

    def test_layout(self) -> None:
        layout = LayoutConfig()
        assert layout.placeholder == "{children}"
        assert layout.region_tag == "body"
        assert PluginsConfig().enabled is True


class TestCommandsConfig:
    def test_install_with_flags(self) -> None:
        cmd = CommandsConfig().install("next-themes", "lucide-react", flags="--force")
        assert cmd == "npm install next-themes lucide-react --force"

    def test_run(self) -> None:
        assert CommandsConfig().run("shadcn@latest init") == "npx shadcn@latest init"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            CommandsConfig().runner = "bunx"  # type: ignore[misc]
