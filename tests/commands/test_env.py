"""Tests for the env command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from scaffoldctl.cli import cli


class TestEnvCommand:
    def test_public_and_secret(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "-C",
                str(project_root),
                "--json",
                "env",
                "--label",
                "Search",
                "NEXT_PUBLIC_SEARCH_ID=abc",
                "--secret",
                "SEARCH_KEY=xyz",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["op"] == "env_merge"
        assert data["data"]["public"]["status"] == "appended"
        assert (project_root / ".env").read_text() == "# Search\nNEXT_PUBLIC_SEARCH_ID=abc\n"
        assert (project_root / ".env.local").read_text() == "# Search\nSEARCH_KEY=xyz\n"
        assert (project_root / ".env.example").read_text() == (
            "# Search\nNEXT_PUBLIC_SEARCH_ID=your_next_public_search_id\nSEARCH_KEY=your_search_key\n"
        )

    def test_rerun_skips(self, cli_runner: CliRunner, project_root: Path) -> None:
        args = ["-C", str(project_root), "--json", "env", "A=1", "B=2"]
        cli_runner.invoke(cli, args)
        result = cli_runner.invoke(cli, args)
        assert json.loads(result.stdout)["data"]["public"]["status"] == "skipped"
        assert (project_root / ".env").read_text() == "A=1\nB=2\n"

    def test_human_output(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "env", "A=1"])
        assert result.exit_code == 0
        assert "OK  env_merge" in result.stdout

    def test_bad_assignment(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "env", "NOPE"])
        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output

    def test_invalid_key(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "env", "1BAD=x"])
        assert result.exit_code == 2

    def test_nothing_to_merge(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "env"])
        assert result.exit_code == 2
        assert not (project_root / ".env").exists()
