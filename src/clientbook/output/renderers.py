"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from clientbook.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from clientbook.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op)
        if renderer is None:
            # Single-field parses share one shape regardless of field.
            renderer = _render_parsed_value if "canonical" in result.data else _render_generic
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the value(s)."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "canonical" in result.data:
        return str(result.data["canonical"])
    for key in ("tags", "fields"):
        if key in result.data:
            return "\n".join(result.data[key])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cb.ok"), Text(f"  {result.op}", style="cb.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="cb.key"), Text(str(value), style=style), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cb.error"),
        Text(f"  {result.op}", style="cb.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_parsed_value(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "field", result.data.get("field", ""), "cb.field")
    _field(console, "canonical", result.data.get("canonical", ""), "cb.value")
    _field(console, "display", result.data.get("display", ""))


def _render_tags(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="cb.key")
    table.add_column("Tag", style="cb.tag")
    for i, name in enumerate(result.data.get("tags", []), start=1):
        table.add_row(str(i), name)
    console.print(table)


def _render_fields(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for name in result.data.get("fields", []):
        console.print(Text(f"  {name}", style="cb.field"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "parse_tags": _render_tags,
    "list_fields": _render_fields,
}
