"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

from scaffoldctl.domain.errors import (
    CommandFailedError,
    ManifestError,
    MissingTemplateError,
    PatchFailedError,
    PromptAbortedError,
    ScaffoldError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MissingTemplateError("app/layout.tsx"), "MISSING_TEMPLATE"),
        (PatchFailedError("no body"), "PATCH_FAILED"),
        (CommandFailedError("npm install x"), "COMMAND_FAILED"),
        (PromptAbortedError(), "PROMPT_ABORTED"),
        (ManifestError("bad"), "MANIFEST_ERROR"),
    ],
)
def test_codes(error: ScaffoldError, code: str) -> None:
    assert isinstance(error, ScaffoldError)
    assert error.code == code


def test_detail_is_kept() -> None:
    err = MissingTemplateError("app/layout.tsx")
    assert err.message == "Template file not found: app/layout.tsx"
    assert err.detail == {"path": "app/layout.tsx"}
    assert CommandFailedError("npx x").detail == {"command": "npx x"}
