"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to commands via
``@click.pass_obj``. Provides lazy Workspace initialization, result
emission, and the end-of-command save.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wirectl.infrastructure.persistence import StoreFormatError
from wirectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from wirectl.config.settings import WireSettings
    from wirectl.infrastructure.workspace import Workspace
    from wirectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace and its store are created on first use so ``--help``,
    ``--version`` and usage errors never read or write the diagram file.
    """

    def __init__(self, settings: WireSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from wirectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The workspace, with its store already loaded.

        Raises:
            click.ClickException: if the diagram file cannot be parsed.
        """
        if self._workspace is None:
            from wirectl.infrastructure.workspace import Workspace

            workspace = Workspace(self.settings)
            try:
                workspace.store  # noqa: B018
            except StoreFormatError as exc:
                msg = f"{workspace.data_path}: {exc}"
                raise click.ClickException(msg) from exc
            self._workspace = workspace
        return self._workspace

    def emit(self, result: ServiceResult) -> None:
        """Format and print a ServiceResult to stdout.

        Failures are printed like any other result and do not change the
        exit code. Warnings go to stderr in human mode; in JSON mode they
        are already part of the payload.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def close(self) -> None:
        """Persist the store if a command loaded it.

        Raises:
            click.ClickException: if the diagram file cannot be written.
        """
        if self._workspace is None:
            return
        try:
            self._workspace.save()
        except OSError as exc:
            msg = f"{self._workspace.data_path}: cannot save: {exc}"
            raise click.ClickException(msg) from exc
