"""Command: list the ports of one module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wirectl.commands._base import WireCommand
from wirectl.services.inspect import InspectService

if TYPE_CHECKING:
    from wirectl.commands._context import AppContext


@click.command(
    "list",
    cls=WireCommand,
    examples="""\
  wirectl list Controller
  wirectl -q list Controller
  wirectl --json list Controller""",
)
@click.argument("module_name")
@click.pass_obj
def list_cmd(app: AppContext, module_name: str) -> None:
    """Show a table of MODULE_NAME's ports."""
    app.emit(InspectService(app.workspace).list_module(module_name))
