"""Tests for Project path resolution and file helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffoldctl.config.settings import ScaffoldSettings
from scaffoldctl.infrastructure.project import Project
from scaffoldctl.infrastructure.prompts import ClickPrompter
from scaffoldctl.infrastructure.shell import CommandRunner


class TestProject:
    def test_paths_from_settings(self, tmp_path: Path) -> None:
        settings = ScaffoldSettings.from_cli(
            project_root=tmp_path, paths={"layout": "src/app/layout.tsx"}
        )
        project = Project(settings)
        assert project.layout_path == tmp_path.resolve() / "src" / "app" / "layout.tsx"
        assert project.env_secret_path.name == ".env.local"

    def test_default_collaborators(self, tmp_path: Path) -> None:
        project = Project(ScaffoldSettings.from_cli(project_root=tmp_path, no_interact=True))
        assert isinstance(project.runner, CommandRunner)
        assert isinstance(project.prompter, ClickPrompter)
        assert project.prompter.interactive is False

    def test_write_and_read(self, tmp_path: Path) -> None:
        project = Project(ScaffoldSettings.from_cli(project_root=tmp_path))
        project.write("lib/a.ts", "export {};\n")
        assert project.read("lib/a.ts") == "export {};\n"
        assert project.read("lib/b.ts") is None

    def test_render(self, tmp_path: Path) -> None:
        project = Project(ScaffoldSettings.from_cli(project_root=tmp_path))
        path = project.render("sign-up-page.tsx", "app/sign-up/page.tsx")
        assert path.is_file()
        assert "<SignUp />" in path.read_text(encoding="utf-8")

    def test_rejects_escaping_paths(self, tmp_path: Path) -> None:
        project = Project(ScaffoldSettings.from_cli(project_root=tmp_path))
        with pytest.raises(ValueError):
            project.write("../evil.ts", "")
