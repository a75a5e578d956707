"""Commands for wirectl.

Provides register_commands() which uses deferred imports to keep
``wirectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from wirectl.commands.add import add
    from wirectl.commands.dot import dot
    from wirectl.commands.draw import draw
    from wirectl.commands.list_cmd import list_cmd
    from wirectl.commands.remove import remove

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(list_cmd)
    cli.add_command(draw)
    cli.add_command(dot)
