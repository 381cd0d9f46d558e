"""SetupService: the interactive feature setup run.

Order of a run:
  1. Validate the package manifest (fatal if unreadable; nothing written).
  2. Ask one yes/no question per feature (fatal if the user aborts).
     An abort at a feature's own prompt ends the run the same way.
  3. Merge the base environment batch and create standard directories.
  4. Run each accepted feature in order. A failing feature is logged and
     reported as a warning; the remaining features still run.
  5. Merge the template's own scripts into the manifest.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from scaffoldctl.config.logging import feature_scope
from scaffoldctl.domain.envfile import EnvDeclaration
from scaffoldctl.domain.errors import ManifestError, PromptAbortedError, ScaffoldError
from scaffoldctl.domain.manifest import load_manifest
from scaffoldctl.features.base import FeatureContext
from scaffoldctl.infrastructure.filesystem import read_text
from scaffoldctl.services.base import BaseService
from scaffoldctl.services.env import EnvService
from scaffoldctl.services.manifest import ManifestService
from scaffoldctl.services.result import ServiceResult

if TYPE_CHECKING:
    from scaffoldctl.features.base import Feature
    from scaffoldctl.infrastructure.project import Project
    from scaffoldctl.infrastructure.prompts import Question

logger = logging.getLogger(__name__)

BASE_ENV = [
    EnvDeclaration(key="NODE_ENV", value="development"),
    EnvDeclaration(key="NEXT_PUBLIC_APP_URL", value="http://localhost:3000"),
]
BASE_ENV_LABEL = "Base Configuration"
BASE_SCRIPTS = {
    "setup": "scaffoldctl setup",
    "format": "prettier --write .",
}


class SetupService(BaseService):
    """Prompt for features and apply the accepted ones to the project."""

    def __init__(
        self,
        project: Project,
        features: list[Feature],
        *,
        progress: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__(project)
        self._features = features
        self._progress = progress

    def questions(self) -> list[Question]:
        """One confirm question per feature, honoring configured defaults."""
        overrides = self._project.settings.features.defaults
        return [f.question(overrides.get(f.name)) for f in self._features]

    def run(
        self,
        answers: dict[str, Any] | None = None,
        *,
        preset: dict[str, bool] | None = None,
    ) -> ServiceResult:
        """Run setup.

        Args:
            answers: Complete answers; skips prompting entirely.
            preset: Answers for some features. Only the rest are asked.
        """
        op = "setup"
        preset = preset or {}

        try:
            load_manifest(read_text(self._project.manifest_path))
        except ManifestError as exc:
            logger.error("Cannot read package manifest: %s", exc.message)
            rel = self._project.settings.paths.manifest
            return ServiceResult.failure(op, exc, data={"path": rel})

        if answers is None:
            pending = [q for q in self.questions() if q.name not in preset]
            try:
                answers = self._project.prompter.prompt(pending) if pending else {}
            except PromptAbortedError as exc:
                return ServiceResult.failure(op, exc)
        answers = {**answers, **preset}

        selected = [f for f in self._features if answers.get(f.name)]
        warnings: list[str] = []
        next_steps: list[str] = []
        files: list[str] = []
        completed: list[str] = []
        failed: list[dict[str, str]] = []

        self._announce("Setting up your project based on your choices...")
        env_result = EnvService(self._project).merge(BASE_ENV, BASE_ENV_LABEL)
        created_dirs = [
            d for d in self._project.settings.paths.directories if self._project.ensure_directory(d)
        ]

        for feature in selected:
            ctx = FeatureContext(self._project, feature.name, progress=self._progress)
            try:
                with feature_scope(feature.name):
                    error = self._run_feature(feature, ctx)
            except PromptAbortedError as exc:
                logger.warning("Setup aborted during %s", feature.name)
                return ServiceResult.failure(
                    op, exc, data={"completed": completed, "aborted": feature.name}
                )
            warnings.extend(ctx.warnings)
            next_steps.extend(ctx.notes)
            files.extend(ctx.files)
            if error is None:
                completed.append(feature.name)
            else:
                failed.append({"feature": feature.name, "code": error[0], "message": error[1]})
                warnings.append(f"{feature.name}: {error[1]}")

        scripts_result = ManifestService(self._project).merge_scripts(BASE_SCRIPTS)
        if not scripts_result.ok:
            # The manifest was valid at the start; a feature broke it.
            message = scripts_result.error.message if scripts_result.error else "update failed"
            warnings.append(f"manifest: {message}")

        next_steps.extend(
            [
                "Run `npm install` to install dependencies",
                "Run `npm run dev` to start the development server",
            ]
        )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "project_root": str(self._project.root),
                "selected": [f.name for f in selected],
                "completed": completed,
                "failed": failed,
                "skipped": [f.name for f in self._features if f not in selected],
                "env": {k: v for k, v in env_result.data.items() if k != "label"},
                "directories_created": created_dirs,
                "files": files,
                "next_steps": next_steps,
            },
            warnings=warnings,
        )

    def _run_feature(self, feature: Feature, ctx: FeatureContext) -> tuple[str, str] | None:
        """Run one feature's setup, returning ``(code, message)`` on failure."""
        logger.debug("Running feature %s", feature.name)
        try:
            feature.setup(ctx)
        except PromptAbortedError:
            raise
        except ScaffoldError as exc:
            logger.warning("Feature %s failed: %s", feature.name, exc.message)
            return exc.code, exc.message
        except Exception as exc:
            # Third-party features must not take down the run.
            logger.warning("Feature %s raised unexpectedly", feature.name, exc_info=True)
            return "FEATURE_ERROR", str(exc) or exc.__class__.__name__
        return None

    def _announce(self, message: str) -> None:
        if self._progress is not None:
            self._progress(message)
