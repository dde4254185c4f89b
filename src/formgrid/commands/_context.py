"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging, loads form definitions and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click

from formgrid.config.logging import configure_logging
from formgrid.domain.errors import DefinitionError
from formgrid.output.formatters import OutputSettings, format_result
from formgrid.services.result import ServiceResult
from formgrid.services.telemetry import disable_telemetry, enable_telemetry

if TYPE_CHECKING:
    from formgrid.config.settings import FormgridSettings
    from formgrid.domain.forms import Form


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FormgridSettings) -> None:
        self.settings = settings
        configure_logging(settings)
        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    def load_form(self, path: str) -> Form:
        """Load a form definition, emitting a failed result on error."""
        from formgrid.infrastructure.definitions import load_definition

        try:
            return load_definition(Path(path))
        except DefinitionError as exc:
            self.fail(ServiceResult.failure("load_definition", exc, path=path))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr unless in JSON
          mode, where they are already part of the payload.
        * Failure: see :meth:`fail`.
        """
        if not result.ok:
            self.fail(result)
        output = format_result(result, settings=self._output_settings())
        click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with status 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
