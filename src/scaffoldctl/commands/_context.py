"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Project construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scaffoldctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from scaffoldctl.config.settings import ScaffoldSettings
    from scaffoldctl.features.base import Feature
    from scaffoldctl.infrastructure.project import Project
    from scaffoldctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The project is created on first use so ``--help`` and ``--version``
    never touch the filesystem.
    """

    def __init__(self, settings: ScaffoldSettings) -> None:
        self.settings = settings
        self._project: Project | None = None

        from scaffoldctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def project(self) -> Project:
        """The project instance (created lazily on first access)."""
        if self._project is None:
            from scaffoldctl.infrastructure.project import Project

            self._project = Project(self.settings)
        return self._project

    def features(self) -> list[Feature]:
        """Features offered by ``setup``, minus the configured ``disabled`` list."""
        from scaffoldctl.plugins import discover_features

        return discover_features(
            load_entrypoints=self.settings.plugins.enabled,
            disabled=self.settings.features.disabled,
        )

    def progress(self, message: str) -> None:
        """Echo a progress line to stderr unless output is quiet or JSON."""
        if self.settings.quiet or self.settings.json_output:
            return
        click.echo(message, err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
