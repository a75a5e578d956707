"""Command: add a link between two ports."""

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
  wirectl add Sensor::temp:float Controller::temp_in
  wirectl add Sensor::temp Logger          # destination port inherits 'temp'
  wirectl add Ctl::cmd:int Motor::speed:uint8
  wirectl --json add A::out B::in""",
)
@click.argument("source_ref")
@click.argument("dest_ref")
@click.pass_obj
def add(app: AppContext, source_ref: str, dest_ref: str) -> None:
    """Link SOURCE_REF (Module::Port[:Type]) to DEST_REF (Module[::Port[:Type]])."""
    app.emit(LinkService(app.workspace).add(source_ref, dest_ref))
