"""Shared pytest fixtures and test helpers for scaffoldctl tests."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from scaffoldctl.config.settings import ScaffoldSettings
from scaffoldctl.infrastructure.project import Project
from scaffoldctl.infrastructure.prompts import Question

LAYOUT = """\
import type { Metadata } from "next";
import { Inter } from "next/font/google";
import "./globals.css";

const inter = Inter({ subsets: ["latin"] });

export default function RootLayout({ children }: { children: React.ReactNode }) {
  return (
    <html lang="en">
      <body className={inter.className}>
        {children}
      </body>
    </html>
  );
}
"""

MANIFEST = {
    "name": "next-template",
    "version": "0.1.0",
    "private": True,
    "scripts": {"dev": "next dev", "build": "next build"},
}


class FakeRunner:
    """Records commands instead of running them.

    Any command containing one of ``fail_on`` reports failure.
    """

    def __init__(self, *, fail_on: Sequence[str] = ()) -> None:
        self.fail_on = tuple(fail_on)
        self.calls: list[tuple[str, bool]] = []

    def execute(self, command: str, interactive: bool = False) -> bool:
        self.calls.append((command, interactive))
        return not any(pattern in command for pattern in self.fail_on)

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]


class FakePrompter:
    """Answers from a fixed mapping, falling back to each question's default."""

    def __init__(self, answers: dict[str, Any] | None = None, *, abort: bool = False) -> None:
        self.answers = answers or {}
        self.abort = abort
        self.asked: list[str] = []

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        from scaffoldctl.domain.errors import PromptAbortedError

        if self.abort:
            raise PromptAbortedError
        result: dict[str, Any] = {}
        for question in questions:
            self.asked.append(question.name)
            result[question.name] = self.answers.get(question.name, question.default)
        return result


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SCAFFOLDCTL_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SCAFFOLDCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A minimal Next.js template: layout, manifest, and nothing else."""
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "layout.tsx").write_text(LAYOUT, encoding="utf-8")
    (tmp_path / "package.json").write_text(json.dumps(MANIFEST, indent=2) + "\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fake_prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def project(project_root: Path, fake_runner: FakeRunner, fake_prompter: FakePrompter) -> Project:
    """Project on the temp template with fake runner and prompter."""
    settings = ScaffoldSettings.from_cli(project_root=project_root)
    return Project(settings, runner=fake_runner, prompter=fake_prompter)


@pytest.fixture
def recorded_commands(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Stub out real command execution for CLI tests; returns the call log."""
    from scaffoldctl.infrastructure.shell import CommandRunner

    calls: list[str] = []

    def _execute(self: CommandRunner, command: str, interactive: bool = False) -> bool:
        calls.append(command)
        return True

    monkeypatch.setattr(CommandRunner, "execute", _execute)
    return calls
