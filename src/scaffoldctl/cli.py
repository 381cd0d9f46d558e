"""Root CLI group for scaffoldctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from scaffoldctl import __version__
from scaffoldctl.commands import register_commands
from scaffoldctl.commands._base import ScaffoldGroup
from scaffoldctl.commands._context import AppContext
from scaffoldctl.config.settings import ScaffoldSettings


@click.group(cls=ScaffoldGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="scaffoldctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (answer defaults).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-C",
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: config file location or CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    project_root: Path | None,
) -> None:
    """scaffoldctl: feature setup for Next.js project templates."""
    ctx.ensure_object(dict)
    settings = ScaffoldSettings.from_cli(
        config_path=config_path,
        project_root=project_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
