"""Package manifest (``package.json``) script merging."""

from __future__ import annotations

import json
from typing import Any

from scaffoldctl.domain.errors import ManifestError


def load_manifest(text: str | None) -> dict[str, Any]:
    """Parse manifest *text*, requiring a JSON object."""
    if text is None:
        msg = "Package manifest not found"
        raise ManifestError(msg)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in package manifest: {exc}"
        raise ManifestError(msg) from exc
    if not isinstance(data, dict):
        msg = "Package manifest must be a JSON object"
        raise ManifestError(msg)
    return data


def dump_manifest(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def merge_scripts(text: str | None, scripts: dict[str, str]) -> str:
    """Merge *scripts* over the manifest's ``scripts`` table; new values win."""
    data = load_manifest(text)
    existing = data.get("scripts") or {}
    if not isinstance(existing, dict):
        msg = "Package manifest 'scripts' must be an object"
        raise ManifestError(msg)
    data["scripts"] = {**existing, **scripts}
    return dump_manifest(data)
