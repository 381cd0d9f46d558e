"""Command: list the features offered by setup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scaffoldctl.commands._base import ScaffoldCommand

if TYPE_CHECKING:
    from scaffoldctl.commands._context import AppContext


@click.command(
    cls=ScaffoldCommand,
    examples="""\
  scaffoldctl features
  scaffoldctl -v features
  scaffoldctl --json features""",
)
@click.pass_obj
def features(app: AppContext) -> None:
    """List discovered features and their default answers."""
    from scaffoldctl.services.result import ServiceResult

    overrides = app.settings.features.defaults
    rows = [
        {
            "name": f.name,
            "message": f.message,
            "default": overrides.get(f.name, f.default),
            "order": f.order,
            "module": type(f).__module__,
        }
        for f in app.features()
    ]
    app.emit(ServiceResult(ok=True, op="list_features", data={"features": rows}))
