"""Tests for whole-file text I/O helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffoldctl.infrastructure.filesystem import (
    ensure_directory,
    read_text,
    resolve_project_path,
    write_text,
)


class TestReadWrite:
    def test_read_missing_returns_none(self, tmp_path: Path) -> None:
        assert read_text(tmp_path / "nope.txt") is None

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "app" / "sign-in" / "page.tsx"
        write_text(target, "x\n")
        assert read_text(target) == "x\n"

    def test_read_directory_returns_none(self, tmp_path: Path) -> None:
        assert read_text(tmp_path) is None


class TestEnsureDirectory:
    def test_reports_creation(self, tmp_path: Path) -> None:
        assert ensure_directory(tmp_path / "lib") is True
        assert ensure_directory(tmp_path / "lib") is False


class TestResolveProjectPath:
    def test_inside_root(self, tmp_path: Path) -> None:
        assert resolve_project_path(tmp_path, "app/layout.tsx") == tmp_path / "app" / "layout.tsx"

    def test_escape_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="escapes"):
            resolve_project_path(tmp_path, "../outside.txt")
