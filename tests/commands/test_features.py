"""Tests for the features command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from scaffoldctl.cli import cli


class TestFeaturesCommand:
    def test_lists_builtins(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "--json", "features"])
        assert result.exit_code == 0, result.output
        rows = json.loads(result.stdout)["data"]["features"]
        assert [r["name"] for r in rows] == [
            "payments",
            "notifications",
            "components",
            "database",
            "auth",
            "sandbox",
        ]
        assert rows[0]["default"] is False

    def test_config_overrides(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "scaffoldctl.toml").write_text(
            '[features]\ndisabled = ["sandbox"]\n\n[features.defaults]\npayments = true\n'
        )
        result = cli_runner.invoke(cli, ["-C", str(project_root), "--json", "features"])
        rows = {r["name"]: r for r in json.loads(result.stdout)["data"]["features"]}
        assert "sandbox" not in rows
        assert rows["payments"]["default"] is True

    def test_quiet(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_root), "-q", "features"])
        assert result.stdout.splitlines()[0] == "payments"
