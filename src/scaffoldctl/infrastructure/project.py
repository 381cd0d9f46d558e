"""Project: the single dependency injected into every service.

Binds an explicit project root to the resolved settings and the two
external collaborators (command execution and prompting). All file paths
are resolved from :attr:`Project.root`; nothing depends on the process's
current working directory after construction.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scaffoldctl.infrastructure.filesystem import (
    ensure_directory,
    read_text,
    resolve_project_path,
    write_text,
)
from scaffoldctl.infrastructure.prompts import ClickPrompter
from scaffoldctl.infrastructure.shell import CommandRunner
from scaffoldctl.infrastructure.templates import build_template_environment, render_template

if TYPE_CHECKING:
    from jinja2 import Environment

    from scaffoldctl.config.settings import ScaffoldSettings
    from scaffoldctl.infrastructure.prompts import Prompter
    from scaffoldctl.infrastructure.shell import CommandExecutor

logger = logging.getLogger(__name__)


class Project:
    """A template project on disk plus the collaborators that act on it."""

    def __init__(
        self,
        settings: ScaffoldSettings,
        *,
        runner: CommandExecutor | None = None,
        prompter: Prompter | None = None,
    ) -> None:
        self.settings = settings
        self.root: Path = settings.project_root
        self.runner: CommandExecutor = runner or CommandRunner(self.root)
        self.prompter: Prompter = prompter or ClickPrompter(
            interactive=not settings.no_interact
        )
        self._templates: Environment | None = None

    # ------------------------------------------------------------------
    # Well-known files
    # ------------------------------------------------------------------

    def path(self, relative: str) -> Path:
        """Resolve a project-relative path."""
        return resolve_project_path(self.root, relative)

    @property
    def layout_path(self) -> Path:
        return self.path(self.settings.paths.layout)

    @property
    def env_public_path(self) -> Path:
        return self.path(self.settings.paths.env_public)

    @property
    def env_secret_path(self) -> Path:
        return self.path(self.settings.paths.env_secret)

    @property
    def env_example_path(self) -> Path | None:
        rel = self.settings.paths.env_example
        return self.path(rel) if rel else None

    @property
    def manifest_path(self) -> Path:
        return self.path(self.settings.paths.manifest)

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def read(self, relative: str) -> str | None:
        return read_text(self.path(relative))

    def write(self, relative: str, content: str) -> Path:
        target = self.path(relative)
        write_text(target, content)
        logger.debug("Wrote %s", target)
        return target

    def ensure_directory(self, relative: str) -> bool:
        return ensure_directory(self.path(relative))

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    @property
    def templates(self) -> Environment:
        """Feature template environment (created lazily on first access)."""
        if self._templates is None:
            self._templates = build_template_environment("features", project_root=self.root)
        return self._templates

    def render(self, template: str, target: str, **context: Any) -> Path:
        """Render packaged *template* into the project file *target*."""
        return self.write(target, render_template(self.templates, template, **context))
