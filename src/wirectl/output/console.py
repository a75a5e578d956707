"""Rich Console factory and theme for wirectl output.

Consoles render into a StringIO buffer so renderers return plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WIRE_THEME = Theme(
    {
        "wire.ok": "bold green",
        "wire.error": "bold red",
        "wire.op": "bold cyan",
        "wire.key": "dim",
        "wire.module": "bold",
        "wire.port": "bold blue",
        "wire.type": "magenta",
        "wire.dir.in": "green",
        "wire.dir.out": "yellow",
        "wire.dir.none": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=WIRE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_direction(direction: str) -> str:
    return f"wire.dir.{direction}" if direction in ("in", "out", "none") else ""
