"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.

User-supplied names always go through :class:`rich.text.Text` so square
brackets in module or port names are never read as markup.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from wirectl.output.console import create_console, get_output, style_for_direction

if TYPE_CHECKING:
    from rich.console import Console

    from wirectl.services.result import ServiceResult

_NO_DESTINATION = "--"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Listings print one name per line; everything else prints a status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_module":
        return "\n".join(p["name"] for p in result.data.get("ports", []))
    if result.op == "draw":
        return "\n".join(m["name"] for m in result.data.get("modules", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="wire.ok"), Text(f"  {result.op}", style="wire.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="wire.key") + Text(str(value)))


def _port_text(port: dict[str, Any]) -> Text:
    return Text.assemble(
        (str(port["name"]), "wire.port"),
        " (",
        (str(port["type"]), "wire.type"),
        ")",
    )


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="wire.error"),
        Text(f"  {result.op}", style="wire.op"),
        Text(f" — {msg}"),
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Link renderers ────────────────────────────────────────────────────


def _render_link_add(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(Text(f"Linked: [{d['source']}] -> [{d['destination']}]"))
    if verbose:
        for key in ("source_module", "source_port", "source_type"):
            _field(console, key, d[key])
        for key in ("dest_module", "dest_port", "dest_type"):
            _field(console, key, d[key])


def _render_link_remove(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    console.print(Text(f"Link removed: {d['source']} -> {d['destination']}"))


# ── Inspect renderers ─────────────────────────────────────────────────


def _render_list_module(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render one module's ports as a table."""
    d = result.data
    console.print(Text.assemble("Module: ", (d["module"], "wire.module")))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Port", style="wire.port", no_wrap=True)
    table.add_column("Type", style="wire.type")
    table.add_column("Dir")
    table.add_column("Destination")
    for port in d["ports"]:
        direction = str(port["direction"])
        table.add_row(
            Text(str(port["name"])),
            Text(str(port["type"])),
            Text(direction, style=style_for_direction(direction)),
            Text(port["destination"] or _NO_DESTINATION),
        )
    console.print(table)
    count = d.get("count", len(d["ports"]))
    console.print(f"\n{count} port{'s' if count != 1 else ''}")


def _render_draw(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the text diagram: each module followed by its IN and OUT ports."""
    console.print(Text("--- System Diagram ---", style="bold"))
    for module in result.data.get("modules", []):
        console.print(Text(f"[{module['name']}]", style="wire.module"))
        for port in module["ports"]:
            if port["direction"] == "in":
                console.print(Text("  -> (IN)  ", style="wire.dir.in") + _port_text(port))
            else:
                dest = port["destination"] or _NO_DESTINATION
                console.print(
                    Text("  <- (OUT) ", style="wire.dir.out")
                    + _port_text(port)
                    + Text(f" -> [{dest}]")
                )
    if verbose:
        console.print()
        _field(console, "module_count", result.data.get("module_count", 0))
        _field(console, "link_count", result.data.get("link_count", 0))


# ── Export renderer ───────────────────────────────────────────────────


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render export results with output paths and counts."""
    _status_line(console, result)
    d = result.data
    _field(console, "output_file", d["output_file"])
    if d.get("image_file"):
        _field(console, "image_file", d["image_file"])
    for key in ("node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])
    if verbose and d.get("content"):
        console.print()
        console.print(Text(d["content"].rstrip("\n")))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "link_add": _render_link_add,
    "link_remove": _render_link_remove,
    "list_module": _render_list_module,
    "draw": _render_draw,
    "export_dot": _render_export,
}
