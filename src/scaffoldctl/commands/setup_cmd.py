"""Command: interactive feature setup for the current project."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scaffoldctl.commands._base import ScaffoldCommand

if TYPE_CHECKING:
    from scaffoldctl.commands._context import AppContext


@click.command(
    cls=ScaffoldCommand,
    examples="""\
  scaffoldctl setup
  scaffoldctl setup --defaults
  scaffoldctl setup --defaults --with payments --without sandbox
  scaffoldctl -C ./my-app --no-interact setup
  scaffoldctl --json setup --defaults""",
)
@click.option("--defaults", is_flag=True, help="Accept every feature's default answer.")
@click.option(
    "--with",
    "include",
    multiple=True,
    metavar="FEATURE",
    help="Enable a feature without asking (repeatable).",
)
@click.option(
    "--without",
    "exclude",
    multiple=True,
    metavar="FEATURE",
    help="Disable a feature without asking (repeatable).",
)
@click.pass_obj
def setup(
    app: AppContext,
    defaults: bool,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
) -> None:
    """Ask which features to enable, then apply them to the project."""
    from scaffoldctl.services.setup import SetupService

    features = app.features()
    known = {f.name for f in features}
    unknown = sorted((set(include) | set(exclude)) - known)
    if unknown:
        msg = f"Unknown feature(s): {', '.join(unknown)}. Available: {', '.join(sorted(known))}"
        raise click.UsageError(msg)
    overlap = sorted(set(include) & set(exclude))
    if overlap:
        msg = f"Feature(s) both enabled and disabled: {', '.join(overlap)}"
        raise click.UsageError(msg)

    svc = SetupService(app.project, features, progress=app.progress)

    answers = {q.name: bool(q.default) for q in svc.questions()} if defaults else None
    preset = {name: True for name in include}
    preset.update({name: False for name in exclude})
    app.emit(svc.run(answers, preset=preset))
