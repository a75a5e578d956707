"""Command: remove a link between two ports."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wirectl.commands._base import WireCommand
from wirectl.services.link import LinkService

if TYPE_CHECKING:
    from wirectl.commands._context import AppContext


@click.command(
    cls=WireCommand,
    examples="""\
  wirectl remove Sensor::temp Controller::temp_in
  wirectl --json remove A::out B::in""",
)
@click.argument("source_ref")
@click.argument("dest_ref")
@click.pass_obj
def remove(app: AppContext, source_ref: str, dest_ref: str) -> None:
    """Remove the link from SOURCE_REF to DEST_REF (types are ignored)."""
    app.emit(LinkService(app.workspace).remove(source_ref, dest_ref))
