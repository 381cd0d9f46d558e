"""Subcommand modules for scaffoldctl.

Provides register_commands() which uses deferred imports to keep
``scaffoldctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from scaffoldctl.commands.env_cmd import env
    from scaffoldctl.commands.features_cmd import features
    from scaffoldctl.commands.layout_cmd import layout
    from scaffoldctl.commands.setup_cmd import setup

    cli.add_command(setup)
    cli.add_command(layout)
    cli.add_command(env)
    cli.add_command(features)
