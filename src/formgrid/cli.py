"""Root CLI group for formgrid with global flags and command registration."""

from __future__ import annotations

import click

from formgrid import __version__
from formgrid.commands import register_commands
from formgrid.commands._base import FgGroup
from formgrid.commands._context import AppContext
from formgrid.config.settings import FormgridSettings
from formgrid.domain.errors import FormgridError


@click.group(cls=FgGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="formgrid")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """formgrid — resolve form layouts on a 12-unit grid."""
    try:
        settings = FormgridSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except FormgridError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
