"""Feature modules: the optional toggles offered by ``scaffoldctl setup``.

A :class:`Feature` declares its prompt (name, message, default) and a
``setup`` routine. Setup routines talk to the project only through a
:class:`FeatureContext`, which wraps the services and records the warnings
and next-step notes shown in the final summary.

Failure contract: a command that must succeed raises
:class:`~scaffoldctl.domain.errors.CommandFailedError`, which ends the
feature. Layout patch failures are recorded as warnings and the feature
continues.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, ClassVar

from scaffoldctl.domain.envfile import EnvDeclaration
from scaffoldctl.domain.errors import CommandFailedError
from scaffoldctl.domain.layout import DEFAULT_PLACEHOLDER, LayoutEditRequest
from scaffoldctl.infrastructure.prompts import Question
from scaffoldctl.services.env import EnvService
from scaffoldctl.services.layout import LayoutService
from scaffoldctl.services.manifest import ManifestService

if TYPE_CHECKING:
    from pathlib import Path

    from scaffoldctl.config.models import CommandsConfig
    from scaffoldctl.infrastructure.project import Project
    from scaffoldctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class FeatureContext:
    """What a feature's setup routine may do to the project."""

    def __init__(
        self,
        project: Project,
        feature: str,
        *,
        progress: Callable[[str], None] | None = None,
    ) -> None:
        self.project = project
        self.feature = feature
        self.warnings: list[str] = []
        self.notes: list[str] = []
        self.files: list[str] = []
        self._progress = progress

    @property
    def commands(self) -> CommandsConfig:
        return self.project.settings.commands

    # -- reporting -------------------------------------------------------

    def step(self, message: str) -> None:
        """Announce a step to the user (and the debug log)."""
        logger.debug("%s: %s", self.feature, message)
        if self._progress is not None:
            self._progress(message)

    def note(self, message: str) -> None:
        """Record a next-step hint for the final summary."""
        self.notes.append(message)

    def warn(self, message: str) -> None:
        logger.warning("%s: %s", self.feature, message)
        self.warnings.append(f"{self.feature}: {message}")

    # -- commands --------------------------------------------------------

    def execute(self, command: str, *, interactive: bool = False, required: bool = True) -> bool:
        """Run *command*; raise CommandFailedError if it fails and is *required*."""
        ok = self.project.runner.execute(command, interactive=interactive)
        if not ok and required:
            raise CommandFailedError(command)
        return ok

    def install(self, *packages: str, flags: str = "") -> None:
        self.execute(self.commands.install(*packages, flags=flags))

    def run_tool(self, command: str, *, interactive: bool = False) -> None:
        self.execute(self.commands.run(command), interactive=interactive)

    # -- prompting -------------------------------------------------------

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        return self.project.prompter.prompt(questions)

    # -- files -----------------------------------------------------------

    def ensure_directory(self, relative: str) -> bool:
        return self.project.ensure_directory(relative)

    def render(self, template: str, target: str, **context: Any) -> Path:
        path = self.project.render(template, target, **context)
        self.files.append(target)
        return path

    def merge_env(
        self,
        declarations: list[EnvDeclaration],
        section_label: str | None = None,
    ) -> ServiceResult:
        return EnvService(self.project).merge(declarations, section_label)

    def update_layout(self, import_line: str, fragment: str, *, marker: str | None = None) -> bool:
        """Splice a provider into the layout; failures become warnings."""
        placeholder = self.project.settings.layout.placeholder
        if placeholder != DEFAULT_PLACEHOLDER:
            fragment = fragment.replace(DEFAULT_PLACEHOLDER, placeholder)
        request = LayoutEditRequest(
            import_line=import_line,
            fragment=fragment,
            marker=marker,
            placeholder=placeholder,
        )
        result = LayoutService(self.project).apply(request)
        if not result.ok:
            self.warn(result.error.message if result.error else "layout update failed")
        return result.ok

    def ensure_layout_attribute(self, tag: str, attribute: str) -> bool:
        result = LayoutService(self.project).ensure_attribute(tag, attribute)
        if not result.ok:
            self.warn(result.error.message if result.error else "layout update failed")
        return result.ok

    def merge_scripts(self, scripts: dict[str, str]) -> bool:
        result = ManifestService(self.project).merge_scripts(scripts)
        if not result.ok:
            self.warn(result.error.message if result.error else "manifest update failed")
        return result.ok


class Feature:
    """Base class for feature modules.

    Subclasses set ``name``, ``message`` and ``default`` and implement
    :meth:`setup`. ``order`` controls the prompt and execution order.
    """

    name: ClassVar[str]
    message: ClassVar[str]
    default: ClassVar[bool] = False
    order: ClassVar[int] = 100

    def question(self, default: bool | None = None) -> Question:
        return Question(
            name=self.name,
            message=self.message,
            default=self.default if default is None else default,
        )

    def setup(self, ctx: FeatureContext) -> None:
        raise NotImplementedError
