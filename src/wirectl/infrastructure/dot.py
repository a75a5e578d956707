"""Graphviz DOT output for the link graph.

Each module is a ``shape=plain`` node with an HTML-like table label:
IN ports on the left, the module name in the middle, OUT ports on the
right. A side with no ports is left out of the label entirely. Edges run
from the east side of the source port cell to the west side of the
destination port cell.
"""

from __future__ import annotations

from html import escape
from typing import Any

import networkx as nx

_CELL = '<td port="{port}" bgcolor="#ffffff">{label}</td>'


def _quote(identifier: str) -> str:
    """Quote a DOT identifier."""
    return '"' + identifier.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _port_column(ports: list[str]) -> list[str]:
    lines = ['       <td><table border="0" cellborder="1" cellspacing="0" cellpadding="4">']
    for name in ports:
        cell = _CELL.format(port=escape(name, quote=True), label=escape(name))
        lines.append(f"         <tr>{cell}</tr>")
    lines.append("       </table></td>")
    return lines


def _node_lines(name: str, attrs: dict[str, Any]) -> list[str]:
    in_ports: list[str] = attrs.get("in_ports", [])
    out_ports: list[str] = attrs.get("out_ports", [])

    lines = [
        f"  {_quote(name)} [label=<",
        '   <table border="0" cellborder="0" cellspacing="0" cellpadding="0">',
        "     <tr>",
    ]
    if in_ports:
        lines.extend(_port_column(in_ports))
    lines.extend(
        [
            '       <td border="1" bgcolor="#f0f0f0">'
            '<table border="0" cellborder="0" cellspacing="0" cellpadding="8">',
            f"         <tr><td><b>{escape(name)}</b></td></tr>",
            "       </table></td>",
        ]
    )
    if out_ports:
        lines.extend(_port_column(out_ports))
    lines.extend(["     </tr>", "   </table>>];"])
    return lines


def graph_to_dot(g: nx.MultiDiGraph, *, rankdir: str = "LR", font: str = "Arial") -> str:
    """Render the module graph built by :class:`GraphEngine` as DOT text."""
    font_attr = _quote(font)
    lines = [
        "digraph G {",
        f"  rankdir={rankdir};",
        "  splines=ortho;",
        "  nodesep=0.8;",
        "  ranksep=1.0;",
        f"  node [shape=plain, fontname={font_attr}, fontsize=12];",
        f"  edge [fontname={font_attr}, fontsize=10];",
        "",
    ]

    for name, attrs in g.nodes(data=True):
        lines.extend(_node_lines(str(name), attrs))
        lines.append("")

    edges = sorted(g.edges(data=True), key=lambda edge: edge[2].get("order", 0))
    for src, dst, attrs in edges:
        lines.append(
            f"  {_quote(src)}:{_quote(attrs['src_port'])}:e"
            f" -> {_quote(dst)}:{_quote(attrs['dst_port'])}:w;"
        )

    lines.append("}")
    return "\n".join(lines) + "\n"
