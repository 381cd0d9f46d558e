"""LayoutService: read, compose, and write the shared layout file."""

from __future__ import annotations

import logging
from typing import Any

from scaffoldctl.domain.errors import MissingTemplateError, ScaffoldError
from scaffoldctl.domain.layout import (
    LayoutEditRequest,
    apply_layout_edit,
    ensure_tag_attribute,
)
from scaffoldctl.infrastructure.filesystem import read_text, write_text
from scaffoldctl.services.base import BaseService
from scaffoldctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class LayoutService(BaseService):
    """Apply provider edits to the configured layout file.

    Failures (missing file, markers not found) leave the file untouched and
    come back as ``ok=False`` results; callers report them and carry on.
    """

    def apply(self, request: LayoutEditRequest) -> ServiceResult:
        """Apply *request* to the layout file."""
        op = "layout_apply"
        path = self._project.layout_path
        rel = self._project.settings.paths.layout

        document = read_text(path)
        try:
            if document is None:
                raise MissingTemplateError(rel)
            edit = apply_layout_edit(
                document,
                request,
                region_tag=self._project.settings.layout.region_tag,
            )
        except ScaffoldError as exc:
            logger.warning("Layout edit failed for %s: %s", rel, exc.message)
            return ServiceResult.failure(op, exc, data={"path": rel})

        if edit.changed:
            write_text(path, edit.text)
            logger.debug("Updated %s (%s)", rel, edit.mode)
        else:
            logger.debug("Layout already contains %s", request.element_name or "fragment")

        data: dict[str, Any] = {
            "path": rel,
            "changed": edit.changed,
            "mode": edit.mode,
            "import_added": edit.import_added,
        }
        if edit.parent is not None:
            data["parent"] = edit.parent
        if edit.providers:
            data["providers"] = edit.providers
        return ServiceResult(ok=True, op=op, data=data)

    def ensure_attribute(self, tag: str, attribute: str) -> ServiceResult:
        """Add a bare *attribute* to the layout's first ``<tag>`` opener."""
        op = "layout_attribute"
        path = self._project.layout_path
        rel = self._project.settings.paths.layout

        document = read_text(path)
        try:
            if document is None:
                raise MissingTemplateError(rel)
            updated = ensure_tag_attribute(document, tag, attribute)
        except ScaffoldError as exc:
            logger.warning("Attribute edit failed for %s: %s", rel, exc.message)
            return ServiceResult.failure(op, exc, data={"path": rel})

        changed = updated != document
        if changed:
            write_text(path, updated)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": rel, "tag": tag, "attribute": attribute, "changed": changed},
        )
