"""Error taxonomy for scaffolding operations.

Every error carries a stable ``code`` so the service layer can translate it
into a :class:`~scaffoldctl.services.result.ServiceError` without string
matching on messages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ScaffoldError(Exception):
    """Base class for all scaffoldctl errors."""

    code = "SCAFFOLD_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class MissingTemplateError(ScaffoldError):
    """The file to patch does not exist."""

    code = "MISSING_TEMPLATE"

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Template file not found: {path}", path=str(path))


class PatchFailedError(ScaffoldError):
    """A structural marker could not be located; the document is unchanged."""

    code = "PATCH_FAILED"


class CommandFailedError(ScaffoldError):
    """An external install/init command returned non-zero."""

    code = "COMMAND_FAILED"

    def __init__(self, command: str) -> None:
        super().__init__(f"Command failed: {command}", command=command)


class PromptAbortedError(ScaffoldError):
    """The user interrupted interactive input."""

    code = "PROMPT_ABORTED"

    def __init__(self, message: str = "Prompt aborted by user") -> None:
        super().__init__(message)


class ManifestError(ScaffoldError):
    """The package manifest is missing, unreadable, or not a JSON object."""

    code = "MANIFEST_ERROR"
