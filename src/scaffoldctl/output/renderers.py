"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from scaffoldctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from scaffoldctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "list_features":
        return "\n".join(f["name"] for f in result.data.get("features", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "sc.ok"), (f"  {result.op}", "sc.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, list):
        shown = ", ".join(str(x) for x in value) if value else "-"
    else:
        shown = str(value)
    style = "sc.path" if key == "path" else ""
    console.print(Text.assemble((f"  {key}: ", "sc.key"), (shown, style)))


def _bullets(console: Console, title: str, lines: list[str], *, style: str = "") -> None:
    if not lines:
        return
    console.print()
    console.print(Text(title, style="bold"))
    for line in lines:
        console.print(Text(f"  • {line}", style=style))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text.assemble(("ERROR", "sc.error"), (f"  {result.op}", "sc.op"), f"{code}: ", msg)
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _env_table(env: dict[str, Any]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("File", style="sc.path")
    table.add_column("Batch")
    table.add_column("Status")
    table.add_column("Keys")
    for visibility in ("public", "secret", "example"):
        entry = env.get(visibility)
        if not entry:
            continue
        status = str(entry.get("status", ""))
        table.add_row(
            str(entry.get("path", "")),
            visibility,
            Text(status, style=style_for_status(status)),
            ", ".join(entry.get("keys", [])) or "-",
        )
    return table


def _render_env_merge(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if result.data.get("label"):
        _field(console, "label", result.data["label"])
    console.print(_env_table(result.data))


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "mode", "changed", "import_added", "parent", "providers", "attribute"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_features(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Feature", style="sc.feature", no_wrap=True)
    table.add_column("Default")
    table.add_column("Question")
    if verbose:
        table.add_column("Provider", style="dim")
    for feature in result.data.get("features", []):
        row = [
            str(feature["name"]),
            "yes" if feature["default"] else "no",
            str(feature["message"]),
        ]
        if verbose:
            row.append(str(feature.get("module", "")))
        table.add_row(*row)
    console.print(table)


def _render_setup(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "completed", d.get("completed", []))
    if d.get("failed"):
        _field(console, "failed", [f["feature"] for f in d["failed"]])
    if verbose:
        _field(console, "skipped", d.get("skipped", []))
        _field(console, "directories_created", d.get("directories_created", []))
        _field(console, "files", d.get("files", []))
        if d.get("env"):
            console.print(_env_table(d["env"]))
    _bullets(console, "Next steps:", d.get("next_steps", []), style="sc.step")


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "setup": _render_setup,
    "env_merge": _render_env_merge,
    "layout_apply": _render_layout,
    "layout_attribute": _render_layout,
    "list_features": _render_features,
}
