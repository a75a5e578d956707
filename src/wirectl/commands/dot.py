"""Command: export the diagram as Graphviz DOT (and render it)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wirectl.commands._base import WireCommand
from wirectl.services.export import ExportService

if TYPE_CHECKING:
    from wirectl.commands._context import AppContext


@click.command(
    cls=WireCommand,
    examples="""\
  wirectl dot
  wirectl dot --format png
  wirectl dot --output build/wiring.dot --image build/wiring.svg
  wirectl dot --no-render""",
)
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="DOT file path.")
@click.option("--image", type=click.Path(dir_okay=False), default=None, help="Image file path.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["svg", "png", "pdf"], case_sensitive=False),
    default=None,
    help="Image format for the renderer.",
)
@click.option("--no-render", is_flag=True, help="Write the DOT file only.")
@click.pass_obj
def dot(
    app: AppContext,
    output: str | None,
    image: str | None,
    fmt: str | None,
    no_render: bool,
) -> None:
    """Write the diagram as DOT and render it with Graphviz if available."""
    app.emit(
        ExportService(app.workspace).export_dot(
            output=Path(output) if output else None,
            image=Path(image) if image else None,
            fmt=fmt.lower() if fmt else None,
            render=not no_render,
        )
    )
