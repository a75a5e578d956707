"""Command: print the whole diagram as text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wirectl.commands._base import WireCommand
from wirectl.services.inspect import InspectService

if TYPE_CHECKING:
    from wirectl.commands._context import AppContext


@click.command(
    cls=WireCommand,
    examples="""\
  wirectl draw
  wirectl -v draw""",
)
@click.pass_obj
def draw(app: AppContext) -> None:
    """Print every module with its IN and OUT ports."""
    app.emit(InspectService(app.workspace).draw())
