"""Tests for CommandRunner."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from scaffoldctl.config.logging import configure_logging
from scaffoldctl.infrastructure.shell import CommandRunner, stderr_tail

PY = f'"{sys.executable}"'


class TestCommandRunner:
    def test_success(self, tmp_path: Path) -> None:
        assert CommandRunner(tmp_path).execute(f"{PY} -c \"print('ok')\"") is True

    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        runner = CommandRunner(tmp_path)
        assert runner.execute(f"{PY} -c \"open('marker', 'w').close()\"")
        assert (tmp_path / "marker").is_file()

    def test_failure_returns_false(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        cmd = f"{PY} -c \"import sys; sys.stderr.write('bad thing'); sys.exit(3)\""
        with caplog.at_level("ERROR", logger="scaffoldctl"):
            assert CommandRunner(tmp_path).execute(cmd) is False
        assert "exit 3" in caplog.text
        assert "bad thing" in caplog.text

    def test_missing_cwd_returns_false(self, tmp_path: Path) -> None:
        assert CommandRunner(tmp_path / "missing").execute("echo hi") is False


class TestStderrTail:
    def test_keeps_last_lines(self) -> None:
        text = "\n".join(f"line {i}" for i in range(30))
        tail = stderr_tail(text, limit=3)
        assert tail == "line 27\nline 28\nline 29"

    def test_drops_blank_lines(self) -> None:
        assert stderr_tail("a\n\n  \nb\n") == "a\nb"

    def test_none(self) -> None:
        assert stderr_tail(None) == ""


class TestCommandContext:
    def test_failure_record_carries_command(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        pkg = logging.getLogger("scaffoldctl")
        pkg_level = pkg.level
        try:
            configure_logging(log_json=True)
            cmd = f'{PY} -c "import sys; sys.exit(2)"'
            assert CommandRunner(tmp_path).execute(cmd) is False
            records = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        finally:
            root.handlers = handlers
            root.setLevel(level)
            pkg.setLevel(pkg_level)
        failure = next(r for r in records if "exit 2" in r["event"])
        assert failure["command"] == cmd
        assert failure["level"] == "error"
