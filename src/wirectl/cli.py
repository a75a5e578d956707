"""Root CLI group for wirectl with global flags and command registration."""

from __future__ import annotations

import click

from wirectl import __version__
from wirectl.commands import register_commands
from wirectl.commands._base import WireGroup
from wirectl.commands._context import AppContext
from wirectl.config.discovery import ConfigError
from wirectl.config.settings import WireSettings

_EXAMPLES = """\
  wirectl add Sensor::temp:float Controller::temp_in
  wirectl list Controller
  wirectl remove Sensor::temp Controller::temp_in
  wirectl draw
  wirectl dot"""


@click.group(cls=WireGroup, invoke_without_command=True, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="wirectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """wirectl — wire module ports together and draw the result."""
    ctx.ensure_object(dict)
    try:
        settings = WireSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    cli()
