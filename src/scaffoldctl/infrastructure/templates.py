"""Jinja2 rendering of generated feature files.

Packaged templates live under ``scaffoldctl/templates/<group>/`` and are
named after the file they produce plus a ``.j2`` suffix, e.g.
``ToastProvider.tsx.j2``. A project can override any of them by placing a
file with the same name in ``.scaffoldctl/templates/<group>/`` (or the
shared ``.scaffoldctl/templates/`` root).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

TEMPLATE_SUFFIX = ".j2"
OVERRIDE_DIR = Path(".scaffoldctl") / "templates"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build an environment that checks project overrides before packaged defaults."""
    loaders: list[BaseLoader] = []
    if project_root is not None:
        override_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(override_root / group), str(override_root)]))

    loaders.append(PackageLoader("scaffoldctl", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        autoescape=False,
    )


def render_template(environment: Environment, name: str, **context: Any) -> str:
    """Render the template for output file *name* (suffix added if missing)."""
    template_name = name if name.endswith(TEMPLATE_SUFFIX) else f"{name}{TEMPLATE_SUFFIX}"
    return environment.get_template(template_name).render(**context)
