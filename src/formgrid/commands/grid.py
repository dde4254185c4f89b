"""Command: show grid parameters for nested sub-layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formgrid.commands._base import FgCommand

if TYPE_CHECKING:
    from formgrid.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  formgrid grid
  FORMGRID_GRID__SUB_WIDTH=10 formgrid grid
  formgrid --config site/formgrid.toml --json grid""",
)
@click.pass_obj
def grid(app: AppContext) -> None:
    """Compute sub-layout column spans from the configured [grid] widths."""
    from formgrid.services.layout import LayoutService

    app.emit(LayoutService(app.settings).grid())
