"""Custom Click base classes.

``WireCommand`` and ``WireGroup`` accept an ``examples`` parameter: when
``--examples`` is passed, the command prints usage examples and exits.

``WireCommand`` also turns argument errors (missing or extra arguments)
into a usage message on stdout with exit code 0, so a mistyped command
is a no-op rather than a failure.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class WireCommand(click.Command):
    """Click Command with ``--examples`` and non-fatal usage errors."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            click.echo(f"Error: {exc.format_message()}")
            click.echo(ctx.get_usage())
            ctx.exit(0)


class WireGroup(click.Group):
    """Click Group with ``--examples``.

    Sets ``command_class = WireCommand`` so commands declared on the group
    pick up the same behaviour without an explicit ``cls=``.
    """

    command_class = WireCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
