"""EnvService: merge declarations into the public, secret and example env files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from scaffoldctl.domain.envfile import (
    BatchStatus,
    EnvDeclaration,
    EnvFileSet,
    Visibility,
    merge_env,
    merge_example,
    partition,
)
from scaffoldctl.infrastructure.filesystem import read_text, write_text
from scaffoldctl.services.base import BaseService
from scaffoldctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class EnvService(BaseService):
    """Batch-granular env merging. Absent files are created on first append."""

    def _target(self, visibility: Visibility) -> tuple[str, Path]:
        paths = self._project.settings.paths
        if visibility is Visibility.PUBLIC:
            return paths.env_public, self._project.env_public_path
        return paths.env_secret, self._project.env_secret_path

    def merge(
        self,
        declarations: list[EnvDeclaration],
        section_label: str | None = None,
    ) -> ServiceResult:
        """Merge *declarations*; each visibility batch is all-or-nothing."""
        op = "env_merge"
        targets = {v: self._target(v) for v in Visibility}
        files = EnvFileSet(
            public=read_text(targets[Visibility.PUBLIC][1]) or "",
            secret=read_text(targets[Visibility.SECRET][1]) or "",
        )

        outcome = merge_env(files, declarations, section_label)
        batches = partition(declarations)

        data: dict[str, Any] = {"label": section_label}
        for visibility in Visibility:
            rel, path = targets[visibility]
            status = outcome.status[visibility]
            keys = [d.key for d in batches[visibility]]
            if status is BatchStatus.APPENDED:
                write_text(path, outcome.files.buffer(visibility))
                logger.debug("Appended %d keys to %s", len(keys), rel)
            elif status is BatchStatus.SKIPPED:
                logger.info("Skipped %s batch for %s: keys already present", visibility, rel)
            data[str(visibility)] = {"path": rel, "status": str(status), "keys": keys}

        example = self._merge_example(declarations, section_label)
        if example is not None:
            data["example"] = example

        return ServiceResult(ok=True, op=op, data=data)

    def _merge_example(
        self,
        declarations: list[EnvDeclaration],
        section_label: str | None,
    ) -> dict[str, Any] | None:
        path = self._project.env_example_path
        if path is None:
            return None
        rel = self._project.settings.paths.env_example
        text, status = merge_example(read_text(path) or "", declarations, section_label)
        if status is BatchStatus.APPENDED:
            write_text(path, text)
            logger.debug("Appended %d placeholder keys to %s", len(declarations), rel)
        return {"path": rel, "status": str(status), "keys": [d.key for d in declarations]}
