"""Tests for the layout command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from scaffoldctl.cli import cli

IMPORT = 'import { Providers } from "./providers";'


class TestLayoutCommand:
    def test_wrap(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "-C",
                str(project_root),
                "--json",
                "layout",
                "--import",
                IMPORT,
                "--fragment",
                "<Providers>{children}</Providers>",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["mode"] == "wrap"
        assert data["import_added"] is True
        text = (project_root / "app" / "layout.tsx").read_text()
        assert text.startswith(IMPORT + "\n")
        assert "<Providers>{children}</Providers>" in text

    def test_fragment_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        fragment = project_root / "fragment.tsx"
        fragment.write_text("<Toaster />\n")
        result = cli_runner.invoke(
            cli,
            [
                "-C",
                str(project_root),
                "--json",
                "layout",
                "--import",
                'import { Toaster } from "sonner";',
                "--fragment-file",
                str(fragment),
            ],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["mode"] == "inject"

    def test_missing_layout_fails(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "app" / "layout.tsx").unlink()
        result = cli_runner.invoke(
            cli,
            ["-C", str(project_root), "layout", "--import", IMPORT, "--fragment", "<P />"],
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "MISSING_TEMPLATE" in result.stderr

    def test_requires_one_fragment_source(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "layout", "--import", IMPORT])
        assert result.exit_code == 2

    def test_invalid_request(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "-C",
                str(project_root),
                "layout",
                "--import",
                IMPORT,
                "--fragment",
                "<P>{children}{children}</P>",
            ],
        )
        assert result.exit_code == 2
        assert "more than once" in result.output
