"""Whole-file text I/O for project files.

Every edit is a read-modify-write of the complete file. Reads of absent
files return ``None`` so callers can decide between "treat as empty" and
"missing template" without catching exceptions.
"""

from __future__ import annotations

from pathlib import Path


def read_text(path: Path) -> str | None:
    """Return the file's content, or None if it does not exist."""
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> None:
    """Overwrite *path* with *content*.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def ensure_directory(path: Path) -> bool:
    """Create *path* (and parents) if missing. Returns True if it was created."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def resolve_project_path(root: Path, relative: str) -> Path:
    """Resolve *relative* under *root*, refusing paths that escape it."""
    result = root / relative
    if not result.resolve().is_relative_to(root.resolve()):
        msg = f"Path escapes project root: {relative}"
        raise ValueError(msg)
    return result
