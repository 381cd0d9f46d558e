"""ManifestService: merge npm scripts into the package manifest."""

from __future__ import annotations

import logging

from scaffoldctl.domain.errors import ManifestError
from scaffoldctl.domain.manifest import load_manifest, merge_scripts
from scaffoldctl.infrastructure.filesystem import read_text, write_text
from scaffoldctl.services.base import BaseService
from scaffoldctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ManifestService(BaseService):
    """Read-validate-write access to ``package.json``."""

    def check(self) -> ServiceResult:
        """Verify the manifest exists and parses as a JSON object."""
        op = "manifest_check"
        rel = self._project.settings.paths.manifest
        try:
            data = load_manifest(read_text(self._project.manifest_path))
        except ManifestError as exc:
            return ServiceResult.failure(op, exc, data={"path": rel})
        return ServiceResult(ok=True, op=op, data={"path": rel, "name": data.get("name")})

    def merge_scripts(self, scripts: dict[str, str]) -> ServiceResult:
        """Merge *scripts* into the manifest's ``scripts`` table."""
        op = "manifest_scripts"
        rel = self._project.settings.paths.manifest
        path = self._project.manifest_path
        original = read_text(path)
        try:
            updated = merge_scripts(original, scripts)
        except ManifestError as exc:
            logger.warning("Could not update %s: %s", rel, exc.message)
            return ServiceResult.failure(op, exc, data={"path": rel})

        changed = updated != original
        if changed:
            write_text(path, updated)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": rel, "scripts": sorted(scripts), "changed": changed},
        )
