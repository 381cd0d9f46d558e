"""Click base classes shared by scaffoldctl commands.

Commands declare usage examples via ``examples=``; ``--examples`` prints them
as an indented help section and exits, and ``--help`` points at the flag.
:class:`ScaffoldGroup` lists subcommands in registration order so ``setup``
leads the help output.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class _ExamplesMixin:
    examples: str | None
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip() if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing or not self.examples:
            return
        formatter = ctx.make_formatter()
        with formatter.section(f"Examples for '{ctx.command_path}'"):
            formatter.write(textwrap.indent(self.examples, " " * formatter.current_indent) + "\n")
        click.echo(formatter.getvalue(), nl=False)
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text("Run with --examples for usage examples.")


class ScaffoldCommand(_ExamplesMixin, click.Command):
    """Command with optional ``--examples`` output."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class ScaffoldGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`ScaffoldCommand`."""

    command_class = ScaffoldCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
