"""Command: merge environment declarations into the env files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scaffoldctl.commands._base import ScaffoldCommand

if TYPE_CHECKING:
    from scaffoldctl.commands._context import AppContext
    from scaffoldctl.domain.envfile import EnvDeclaration, Visibility


def _parse(values: tuple[str, ...], visibility: Visibility, hint: str) -> list[EnvDeclaration]:
    from scaffoldctl.domain.envfile import parse_assignment

    parsed: list[EnvDeclaration] = []
    for raw in values:
        try:
            parsed.append(parse_assignment(raw, visibility=visibility))
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint=hint) from exc
    return parsed


@click.command(
    cls=ScaffoldCommand,
    examples="""\
  scaffoldctl env NEXT_PUBLIC_API_URL=http://localhost:4000
  scaffoldctl env --label "Search" NEXT_PUBLIC_SEARCH_ID=abc --secret SEARCH_KEY=xyz
  scaffoldctl env --secret DATABASE_URL=postgres://localhost/app""",
)
@click.argument("assignments", nargs=-1, metavar="[KEY=VALUE]...")
@click.option(
    "--secret",
    "secrets",
    multiple=True,
    metavar="KEY=VALUE",
    help="Declaration for the secret env file (repeatable).",
)
@click.option("--label", default=None, help="Section comment written above the batch.")
@click.pass_obj
def env(
    app: AppContext,
    assignments: tuple[str, ...],
    secrets: tuple[str, ...],
    label: str | None,
) -> None:
    """Append KEY=VALUE declarations unless any of them is already present."""
    from scaffoldctl.domain.envfile import Visibility
    from scaffoldctl.services.env import EnvService

    declarations = _parse(assignments, Visibility.PUBLIC, "KEY=VALUE")
    declarations += _parse(secrets, Visibility.SECRET, "--secret")
    if not declarations:
        msg = "Nothing to merge: pass at least one KEY=VALUE."
        raise click.UsageError(msg)

    app.emit(EnvService(app.project).merge(declarations, label))
