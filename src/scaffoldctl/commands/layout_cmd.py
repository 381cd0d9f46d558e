"""Command: splice a provider fragment into the project layout."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from scaffoldctl.commands._base import ScaffoldCommand

if TYPE_CHECKING:
    from scaffoldctl.commands._context import AppContext


@click.command(
    cls=ScaffoldCommand,
    examples="""\
  scaffoldctl layout --import 'import { Providers } from "./providers";' \\
      --fragment '<Providers>{children}</Providers>'
  scaffoldctl layout --import 'import { Toaster } from "sonner";' --fragment '<Toaster />'
  scaffoldctl layout --import 'import { X } from "x";' --fragment-file fragment.tsx
  scaffoldctl layout --import '...' --fragment '...' --marker '<X '""",
)
@click.option("--import", "import_line", required=True, help="Import statement to add once.")
@click.option("--fragment", default=None, help="Provider markup (wraps {children} if present).")
@click.option(
    "--fragment-file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read the fragment from a file ('-' for stdin).",
)
@click.option("--marker", default=None, help="Text identifying an applied fragment.")
@click.pass_obj
def layout(
    app: AppContext,
    import_line: str,
    fragment: str | None,
    fragment_file: IO[str] | None,
    marker: str | None,
) -> None:
    """Add an import and a wrapping or injected provider to the layout."""
    from scaffoldctl.domain.layout import LayoutEditRequest
    from scaffoldctl.services.layout import LayoutService

    if (fragment is None) == (fragment_file is None):
        msg = "Provide exactly one of --fragment or --fragment-file."
        raise click.UsageError(msg)
    text = fragment if fragment_file is None else fragment_file.read()

    try:
        request = LayoutEditRequest(
            import_line=import_line,
            fragment=text,
            marker=marker,
            placeholder=app.settings.layout.placeholder,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--fragment") from exc

    app.emit(LayoutService(app.project).apply(request))
